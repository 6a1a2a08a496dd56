from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class CustomerContact:
    name: str
    email: str
    phone: str | None = None


@dataclass(frozen=True)
class AppointmentSlot:
    date: date
    time: str  # 12-hour display, e.g. "2:30 PM"
    duration_minutes: int = 60

    @property
    def display_date(self) -> str:
        return f"{self.date:%B} {self.date.day}, {self.date.year}"


@dataclass(frozen=True)
class BookedDress:
    id: str  # slug derived from the dress name
    name: str
    price: float
    image_url: str
    size: int | None = None


@dataclass(frozen=True)
class BookingRecord:
    customer: CustomerContact
    appointment: AppointmentSlot
    dresses: tuple[BookedDress, ...]
    created_at: str
    session_id: str | None
    status: str = "confirmed"

    @property
    def total_price(self) -> float:
        return sum(dress.price for dress in self.dresses)

    def to_document(self) -> dict[str, Any]:
        return {
            "customer": {
                "name": self.customer.name,
                "email": self.customer.email,
                "phone": self.customer.phone,
            },
            "appointment": {
                "date": self.appointment.date.isoformat(),
                "display_date": self.appointment.display_date,
                "time": self.appointment.time,
                "duration_minutes": self.appointment.duration_minutes,
            },
            "dresses": [
                {
                    "id": dress.id,
                    "name": dress.name,
                    "price": dress.price,
                    "image_url": dress.image_url,
                    "size": dress.size,
                }
                for dress in self.dresses
            ],
            "total_price": self.total_price,
            "created_at": self.created_at,
            "session_id": self.session_id,
            "status": self.status,
        }
