from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from app.domain.entities.dress import DressView


@dataclass(frozen=True)
class SelectionRequest:
    ordinals: list[int] = field(default_factory=list)
    candidates: list[DressView] = field(default_factory=list)


@dataclass(frozen=True)
class BookingRequest:
    customer_name: str | None = None
    email: str | None = None
    phone: str | None = None
    appointment_date: date | None = None
    appointment_time: str | None = None
    selection: list[DressView] = field(default_factory=list)
    dress_size: int | None = None

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if not self.customer_name:
            missing.append("name")
        if not self.email:
            missing.append("email")
        if self.appointment_date is None:
            missing.append("appointment date")
        if not self.appointment_time:
            missing.append("appointment time")
        if not self.selection:
            missing.append("dress selection")
        return missing
