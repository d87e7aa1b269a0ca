import enum
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from fleet.infrastructure.db.base import Base

class DriverStatus(str, enum.Enum):
    active = "Active"
    inactive = "Inactive"

class Driver(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), default="")
    cpf: Mapped[str] = mapped_column(String(32), default="")
    cnh_number: Mapped[str] = mapped_column(String(32), default="")
    cnh_category: Mapped[str] = mapped_column(String(120), default="")  # comma-joined codes
    phone: Mapped[str] = mapped_column(String(32), default="")
    status: Mapped[str] = mapped_column(String(16), default=DriverStatus.active.value)

    photo_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    photo_content_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    cnh_pdf_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
