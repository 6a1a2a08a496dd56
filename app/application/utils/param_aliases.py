"""
Session-parameter alias table.

The conversational agent is not consistent about parameter naming
(``dress_type`` vs ``dressType``, ``selectedNumber`` vs ``selectedNumbers``),
so every field is looked up through an explicit list of accepted names and
coerced to its semantic type. A value that fails coercion is treated as
absent, never as an error. Dress lists are the exception: they are values
this service emitted itself, so a damaged one raises MalformedPayloadError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from app.application.dto.stage_requests import BookingRequest, SelectionRequest
from app.application.exceptions import MalformedPayloadError, MissingFieldsError
from app.application.utils.date_parser import parse_date_value, parse_time_value
from app.domain.entities.dress import DressView
from app.domain.entities.search_criteria import SearchCriteria


def coerce_str(value: Any) -> str | None:
    if isinstance(value, dict):
        # @sys.person style values: {"name": "Jane Doe"}
        value = value.get("name") or value.get("original")
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def coerce_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def coerce_int(value: Any) -> int | None:
    number = coerce_float(value)
    if number is None or math.isinf(number) or not number.is_integer():
        return None
    return int(number)


def coerce_int_list(value: Any) -> list[int] | None:
    if value is None:
        return None
    items = value if isinstance(value, (list, tuple)) else [value]
    numbers = [n for n in (coerce_int(item) for item in items) if n is not None]
    return numbers or None


def coerce_dress_list(value: Any) -> list[DressView] | None:
    """
    Read a dress list back from session parameters.

    Position is the only identifier of a dress, so a list with an unreadable
    entry is rejected whole rather than compacted.
    """
    if not isinstance(value, list):
        return None
    views = []
    for position, item in enumerate(value, start=1):
        if not isinstance(item, dict):
            raise MalformedPayloadError(f"Dress #{position} is not an object: {item!r}")
        try:
            views.append(DressView.from_payload(item))
        except ValueError as e:
            raise MalformedPayloadError(f"Dress #{position}: {e}") from e
    return views


@dataclass(frozen=True)
class FieldAlias:
    name: str
    aliases: tuple[str, ...]
    coerce: Callable[[Any], Any]

    def resolve(self, parameters: dict[str, Any]) -> Any:
        for alias in self.aliases:
            if alias not in parameters:
                continue
            value = self.coerce(parameters[alias])
            if value is not None:
                return value
        return None


DRESS_TYPE = FieldAlias("dress_type", ("dress_type", "dressType", "type"), coerce_str)
DRESS_SIZE = FieldAlias("dress_size", ("dress_size", "dressSize", "size"), coerce_int)
MIN_PRICE = FieldAlias("min_price", ("dress_min_price", "dressMinPrice", "min_price", "minPrice"), coerce_float)
MAX_PRICE = FieldAlias("max_price", ("dress_max_price", "dressMaxPrice", "max_price", "maxPrice"), coerce_float)

SELECTED_NUMBERS = FieldAlias(
    "selected_numbers",
    (
        "selectedNumbers",
        "selectednumbers",
        "selected_numbers",
        "selectedNumber",
        "selectednumber",
        "selected_number",
    ),
    coerce_int_list,
)
MATCHING_DRESSES = FieldAlias(
    "matching_dresses", ("matchingDresses", "matching_dresses", "matchingdresses"), coerce_dress_list
)
SELECTED_DRESSES = FieldAlias(
    "selected_dresses", ("selectedDresses", "selected_dresses", "selecteddresses"), coerce_dress_list
)

CUSTOMER_NAME = FieldAlias("customer_name", ("customer_name", "customerName", "name"), coerce_str)
EMAIL = FieldAlias("email", ("email", "customer_email", "customerEmail"), coerce_str)
PHONE = FieldAlias("phone", ("phone", "phone_number", "phoneNumber", "customer_phone"), coerce_str)
APPOINTMENT_DATE = FieldAlias("appointment_date", ("appointment_date", "appointmentDate", "date"), parse_date_value)
APPOINTMENT_TIME = FieldAlias("appointment_time", ("appointment_time", "appointmentTime", "time"), parse_time_value)


def resolve_search_criteria(parameters: dict[str, Any], require_type_and_size: bool = True) -> SearchCriteria:
    """Build Matcher criteria, raising MissingFieldsError under the strict policy."""
    dress_type = DRESS_TYPE.resolve(parameters)
    size = DRESS_SIZE.resolve(parameters)

    if require_type_and_size:
        missing = []
        if dress_type is None:
            missing.append("dress type")
        if size is None:
            missing.append("dress size")
        if missing:
            raise MissingFieldsError(missing)

    min_price = MIN_PRICE.resolve(parameters)
    max_price = MAX_PRICE.resolve(parameters)
    return SearchCriteria(
        dress_type=dress_type,
        size=size or 0,
        min_price=min_price if min_price is not None else 0,
        max_price=max_price if max_price is not None else math.inf,
    )


def resolve_selection_request(parameters: dict[str, Any]) -> SelectionRequest:
    return SelectionRequest(
        ordinals=SELECTED_NUMBERS.resolve(parameters) or [],
        candidates=MATCHING_DRESSES.resolve(parameters) or [],
    )


def resolve_booking_request(parameters: dict[str, Any]) -> BookingRequest:
    return BookingRequest(
        customer_name=CUSTOMER_NAME.resolve(parameters),
        email=EMAIL.resolve(parameters),
        phone=PHONE.resolve(parameters),
        appointment_date=APPOINTMENT_DATE.resolve(parameters),
        appointment_time=APPOINTMENT_TIME.resolve(parameters),
        selection=SELECTED_DRESSES.resolve(parameters) or [],
        dress_size=DRESS_SIZE.resolve(parameters),
    )
