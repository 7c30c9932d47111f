from sqlalchemy import Column, Integer, String, ForeignKey, text
from app.db.base import Base
from app.core.core_config import settings


class ItemPhoto(Base):
    __tablename__ = "item_photos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    filename = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=False)
    # 相對於 DATA_DIR 的路徑，如 uploads/<hex>.jpg
    original_path = Column(String(settings.TABLE_MAX_LENGTH_LINK), nullable=False)
    thumbnail_path = Column(String(settings.TABLE_MAX_LENGTH_LINK), nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=False)
    created_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<ItemPhoto(id={self.id}, item_id={self.item_id}, filename='{self.filename}')>"
