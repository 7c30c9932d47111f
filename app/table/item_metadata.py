from sqlalchemy import Column, Integer, String, Text, ForeignKey, text
from app.db.base import Base
from app.core.core_config import settings


class ItemMetadata(Base):
    __tablename__ = "item_metadata"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    # 同一個 item 允許重複的 key
    key = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=False)
    value = Column(Text, nullable=False)
    created_at = Column(String, server_default=text("(datetime('now'))"))
    updated_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<ItemMetadata(id={self.id}, item_id={self.item_id}, key='{self.key}')>"
