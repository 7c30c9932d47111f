from sqlalchemy import Column, String, text
from app.db.base import Base
from app.core.core_config import settings


class Tote(Base):
    __tablename__ = "totes"

    id = Column(String(settings.TABLE_MAX_LENGTH_TOTE_ID), primary_key=True)
    name = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=False)
    location = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=False)
    size = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=True)
    color = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=True)
    owner = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=True)
    # 時間欄位以 SQLite datetime('now') 文字格式儲存，匯出檔直接沿用
    created_at = Column(String, server_default=text("(datetime('now'))"))
    updated_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<Tote(id={self.id}, name='{self.name}', location='{self.location}')>"
