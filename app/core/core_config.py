from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    # API 配置
    APP_NAME: str = "Tote Sonar"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    API_DEBUG: bool = False

    # 資料目錄（SQLite 檔案、uploads/、thumbnails/ 都放在這裡）
    DATA_DIR: str = "./data"
    DB_FILENAME: str = "tote-sonar.db"
    UPLOAD_DIR: str = "uploads"
    THUMBNAIL_DIR: str = "thumbnails"

    # settings 表的預設值（僅在資料列不存在時寫入）
    DEFAULT_SERVER_HOSTNAME: str = "http://localhost:3000"
    DEFAULT_MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024
    DEFAULT_THEME: str = "light"

    # 照片配置
    ALLOWED_IMAGE_TYPES: list[str] = ["image/jpeg", "image/png", "image/webp"]
    MAX_PHOTOS_PER_ITEM: int = 3
    THUMBNAIL_SIZE: int = 200

    # QR code 配置
    QR_SIZE: int = 300
    QR_MARGIN: int = 2
    QR_BULK_LIMIT: int = 50

    # 表字段长度
    TABLE_MAX_LENGTH_TOTE_ID: int = 6
    TABLE_MAX_LENGTH_NAME: int = 255
    TABLE_MAX_LENGTH_LINK: int = 500

    # CORS 配置（环境变量中使用逗号分隔，如：http://localhost:3000,http://localhost:8080）
    CORS_ORIGINS: str = "*"

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_REQUEST_CONSOLE: bool = False
    LOG_RESPONSE_CONSOLE: bool = False

    @property
    def data_dir(self) -> Path:
        return Path(self.DATA_DIR)

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.DB_FILENAME

    @property
    def upload_dir(self) -> Path:
        return self.data_dir / self.UPLOAD_DIR

    @property
    def thumbnail_dir(self) -> Path:
        return self.data_dir / self.THUMBNAIL_DIR

    @property
    def database_url_async(self) -> str:
        """异步数据库连接 URL (使用 aiosqlite)"""
        return f"sqlite+aiosqlite:///{self.database_path}"

    @property
    def cors_origins_list(self) -> list[str]:
        """获取 CORS 来源列表"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# 全局配置实例
settings = Settings()
