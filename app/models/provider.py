import enum

from sqlalchemy import String, Integer, Float
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base


class TransportType(str, enum.Enum):
    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    METRO = "metro"

    @classmethod
    def parse(cls, value) -> "TransportType | None":
        """Return the member for `value`, or None if it is not a known transport type."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Provider(Base):
    __tablename__ = "transport_providers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120))
    type: Mapped[str] = mapped_column(String(12), index=True)  # flight, train, bus, metro
    logo_url: Mapped[str] = mapped_column(String(512), nullable=True)
    contact_info: Mapped[str] = mapped_column(String(120), nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=True)
