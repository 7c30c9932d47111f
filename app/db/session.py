from typing import AsyncGenerator, Optional
from sqlalchemy import event
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from app.core.core_config import settings
import logging

logger = logging.getLogger(__name__)

# 禁用 SQLAlchemy 引擎的 INFO 级别日志（只保留 WARNING 和 ERROR）
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _on_connect(dbapi_connection, connection_record) -> None:
    # 每條連線都要開啟外鍵檢查（SQLite 預設關閉）
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# 建立引擎（應用啟動時呼叫一次）
def init_engine() -> AsyncEngine:
    global _engine, _session_factory

    if _engine is not None:
        return _engine

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    _engine = create_async_engine(
        settings.database_url_async,
        echo=settings.API_DEBUG,  # 在调试模式下打印 SQL 语句
        future=True,
    )
    event.listen(_engine.sync_engine, "connect", _on_connect)

    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )
    logger.info(f"Database engine created: {settings.database_path}")
    return _engine


# 釋放引擎（應用關閉時呼叫）
async def dispose_engine() -> None:
    global _engine, _session_factory

    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
    logger.info("Database engine disposed")


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise RuntimeError("Database engine is not initialized")
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise RuntimeError("Database engine is not initialized")
    return _session_factory


# 依赖注入：获取数据库会话
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def default_settings() -> dict[str, str]:
    return {
        "server_hostname": settings.DEFAULT_SERVER_HOSTNAME,
        "max_upload_size": str(settings.DEFAULT_MAX_UPLOAD_SIZE),
        "default_tote_fields": "[]",
        "default_metadata_keys": "[]",
        "theme": settings.DEFAULT_THEME,
    }


# 初始化数据库表（可重複執行：只建立不存在的表，只補上缺少的設定）
async def init_db() -> None:
    from app.db.base import Base
    from app.table import Setting

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        for key, value in default_settings().items():
            await conn.execute(
                sqlite_insert(Setting)
                .values(key=key, value=value)
                .on_conflict_do_nothing(index_elements=["key"])
            )
    logger.info("Database schema initialized")
