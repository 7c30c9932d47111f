from sqlalchemy import Column, Integer, String, text
from app.db.base import Base
from app.core.core_config import settings


class MetadataKey(Base):
    """自動完成用的 key 清單，只增不減"""
    __tablename__ = "metadata_keys"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    key_name = Column(String(settings.TABLE_MAX_LENGTH_NAME), unique=True, nullable=False)
    created_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<MetadataKey(id={self.id}, key_name='{self.key_name}')>"
