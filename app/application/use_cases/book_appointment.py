from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Callable

from app.application.dto.stage_requests import BookingRequest
from app.application.ports.document_store import DocumentStorePort
from app.application.utils.param_aliases import resolve_booking_request
from app.application.utils.rich_content import text_message
from app.domain.entities.booking import AppointmentSlot, BookedDress, BookingRecord, CustomerContact
from app.domain.entities.reply import WebhookReply
from app.domain.entities.session_state import SessionState

APPOINTMENT_DURATION_MINUTES = 60
APOLOGY_TEXT = "Sorry, something went wrong while booking your appointment. Please try again."

_WHITESPACE = re.compile(r"\s+")


def dress_slug(name: str) -> str:
    """Storage key for a dress: lowercase, whitespace runs collapsed to "-"."""
    return _WHITESPACE.sub("-", name.strip().lower())


class BookAppointmentUseCase:
    def __init__(
        self,
        store: DocumentStorePort,
        collection: str = "bookings",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._collection = collection
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logging.getLogger(__name__)

    def execute(self, state: SessionState) -> WebhookReply:
        try:
            request = resolve_booking_request(state.parameters)
            missing = request.missing_fields()
            if missing:
                self._logger.info(
                    "Booking details incomplete",
                    extra={"stage": "book_appointment", "session": state.session, "missing": ",".join(missing)},
                )
                return WebhookReply(messages=[text_message(_missing_fields_text(missing))])

            record = self.build_record(request, state.session)
            # No idempotency key: a resubmitted turn creates a second record.
            booking_id = self._store.create_document(self._collection, record.to_document())
            self._logger.info(
                "Booking created",
                extra={"stage": "book_appointment", "session": state.session, "booking_id": booking_id},
            )

            confirmation = (
                f"Thank you, {record.customer.name}! Your appointment is booked for "
                f"{record.appointment.display_date} at {record.appointment.time}. "
                f"Your booking reference is {booking_id}."
            )
            return WebhookReply(
                messages=[text_message(confirmation)],
                parameters=state.with_parameters(bookingId=booking_id, bookingComplete=True),
            )
        except Exception as e:
            self._logger.exception(
                "Book appointment webhook failed",
                extra={"stage": "book_appointment", "session": state.session, "error": str(e)},
            )
            return self.apology()

    def build_record(self, request: BookingRequest, session_id: str | None) -> BookingRecord:
        if request.appointment_date is None or request.appointment_time is None:
            raise ValueError("Booking request is missing its appointment date or time")
        return BookingRecord(
            customer=CustomerContact(
                name=request.customer_name or "",
                email=request.email or "",
                phone=request.phone,
            ),
            appointment=AppointmentSlot(
                date=request.appointment_date,
                time=request.appointment_time,
                duration_minutes=APPOINTMENT_DURATION_MINUTES,
            ),
            dresses=tuple(
                BookedDress(
                    id=dress_slug(dress.name),
                    name=dress.name,
                    price=dress.price,
                    image_url=dress.image_url,
                    size=request.dress_size,
                )
                for dress in request.selection
            ),
            created_at=self._clock().isoformat(),
            session_id=session_id,
        )

    def apology(self) -> WebhookReply:
        return WebhookReply(messages=[text_message(APOLOGY_TEXT)])


def _missing_fields_text(fields: list[str]) -> str:
    if len(fields) == 1:
        listed = fields[0]
    else:
        listed = f"{', '.join(fields[:-1])} and {fields[-1]}"
    return f"I still need your {listed} to complete the booking."
