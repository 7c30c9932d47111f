from sqlalchemy import Column, Integer, String, Text, ForeignKey, text
from app.db.base import Base
from app.core.core_config import settings


class Item(Base):
    __tablename__ = "items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    tote_id = Column(
        String(settings.TABLE_MAX_LENGTH_TOTE_ID),
        ForeignKey("totes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(settings.TABLE_MAX_LENGTH_NAME), nullable=False)
    description = Column(Text, nullable=True)
    quantity = Column(Integer, default=1, server_default=text("1"))
    created_at = Column(String, server_default=text("(datetime('now'))"))
    updated_at = Column(String, server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<Item(id={self.id}, name='{self.name}', quantity={self.quantity}, tote_id={self.tote_id})>"
