"""Builders for Dialogflow Messenger fulfillment messages."""

from __future__ import annotations

from typing import Any

from app.domain.entities.dress import DressView

SELECT_DRESS_EVENT = "select-dress"
KEYCAP = "\ufe0f\u20e3"


def text_message(text: str) -> dict[str, Any]:
    return {"text": {"text": [text]}}


def rich_content_message(cards: list[list[dict[str, Any]]]) -> dict[str, Any]:
    return {"payload": {"richContent": cards}}


def image_element(url: str, accessibility_text: str) -> dict[str, Any]:
    return {"type": "image", "rawUrl": url, "accessibilityText": accessibility_text}


def info_element(title: str, subtitle: str, buttons: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    element: dict[str, Any] = {"type": "info", "title": title, "subtitle": subtitle}
    if buttons:
        element["buttons"] = buttons
    return element


def event_button(text: str, event_name: str, parameters: dict[str, Any]) -> dict[str, Any]:
    return {
        "text": text,
        "event": {"name": event_name, "languageCode": "", "parameters": parameters},
    }


def format_price(price: float) -> str:
    """Whole amounts print without a fractional part (1200.0 -> "1200")."""
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def _subtitle(dress: DressView) -> str:
    return f"Price: ${format_price(dress.price)}\n{dress.description}"


def candidate_card(position: int, dress: DressView) -> list[dict[str, Any]]:
    """Numbered card with a button that sends ``position`` back to the select-dress route."""
    return [
        image_element(dress.image_url, dress.name),
        info_element(
            title=f"{position}{KEYCAP} {dress.name}",
            subtitle=_subtitle(dress),
            buttons=[event_button("Select this Dress", SELECT_DRESS_EVENT, {"selectedNumber": position})],
        ),
    ]


def selected_card(dress: DressView) -> list[dict[str, Any]]:
    return [
        image_element(dress.image_url, dress.name),
        info_element(title=dress.name, subtitle=_subtitle(dress)),
    ]
