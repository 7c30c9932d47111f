from sqlalchemy import Column, Integer, String, Text, text
from app.db.base import Base
from app.core.core_config import settings


class Setting(Base):
    __tablename__ = "settings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(settings.TABLE_MAX_LENGTH_NAME), unique=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<Setting(key='{self.key}', value='{self.value}')>"
