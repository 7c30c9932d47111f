from sqlalchemy import Column, Integer, String, ForeignKey, text
from app.db.base import Base
from app.core.core_config import settings


class ItemMovementHistory(Base):
    __tablename__ = "item_movement_history"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    # 來源 tote 未知（舊資料）或已刪除時為 NULL
    from_tote_id = Column(
        String(settings.TABLE_MAX_LENGTH_TOTE_ID),
        ForeignKey("totes.id", ondelete="SET NULL"),
        nullable=True,
    )
    to_tote_id = Column(
        String(settings.TABLE_MAX_LENGTH_TOTE_ID),
        ForeignKey("totes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    moved_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<ItemMovementHistory(id={self.id}, item_id={self.item_id}, from_tote_id={self.from_tote_id}, to_tote_id={self.to_tote_id})>"
