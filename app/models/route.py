from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

class Route(Base):
    __tablename__ = "routes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    provider_id: Mapped[int] = mapped_column(ForeignKey("transport_providers.id"), index=True)
    source: Mapped[str] = mapped_column(String(120), index=True)
    destination: Mapped[str] = mapped_column(String(120), index=True)
    duration: Mapped[int] = mapped_column(Integer)  # minutes
    distance: Mapped[int] = mapped_column(Integer, nullable=True)  # km
    stops_count: Mapped[int] = mapped_column(Integer, default=0)
    route_number: Mapped[str] = mapped_column(String(40), nullable=True)
