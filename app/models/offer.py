from sqlalchemy import String, Integer, DateTime, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.db.session import Base

class Offer(Base):
    __tablename__ = "offers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text)
    discount: Mapped[int] = mapped_column(Integer, nullable=True)  # percent
    valid_until: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=True)
    image_url: Mapped[str] = mapped_column(String(512), nullable=True)
    applicable_types: Mapped[list] = mapped_column(JSON, default=list)  # ["bus", "train", ...]
