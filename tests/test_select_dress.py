"""
Tests for the select-dress stage (ordinal resolution).
"""

from __future__ import annotations

from app.application.use_cases.select_dress import (
    APOLOGY_TEXT,
    INVALID_NUMBERS_TEXT,
    SEARCH_AGAIN_TEXT,
    SelectDressUseCase,
    resolve_ordinals,
)
from app.domain.entities.dress import DressView
from app.domain.entities.reply import WebhookReply
from app.domain.entities.session_state import SessionState


CANDIDATES = [
    {"name": "Aurora Ballgown", "price": 1500, "description": "Tulle.", "image_url": "https://example.com/a.jpg"},
    {"name": "Luna Ballgown", "price": 2500, "description": "Train.", "image_url": "https://example.com/l.jpg"},
    {"name": "Nova Ballgown", "price": 1200.5, "description": "Satin.", "image_url": "https://example.com/n.jpg"},
]


def _execute(parameters: dict) -> WebhookReply:
    return SelectDressUseCase().execute(SessionState(parameters=parameters, session="s-1"))


def test_resolution_succeeds_only_inside_range():
    views = [DressView.from_payload(c) for c in CANDIDATES]
    for n in range(-2, 6):
        resolved = resolve_ordinals([n], views)
        if 1 <= n <= len(views):
            assert resolved == [views[n - 1]]
        else:
            assert resolved == []


def test_order_and_duplicates_are_preserved():
    views = [DressView.from_payload(c) for c in CANDIDATES]
    resolved = resolve_ordinals([3, 1, 3], views)
    assert [v.name for v in resolved] == ["Nova Ballgown", "Aurora Ballgown", "Nova Ballgown"]


def test_empty_candidate_list_asks_to_search_again():
    reply = _execute({"selectedNumbers": [1], "matchingDresses": []})

    assert reply.messages == [{"text": {"text": [SEARCH_AGAIN_TEXT]}}]
    assert reply.parameters is None


def test_missing_candidate_list_asks_to_search_again():
    reply = _execute({"selectedNumber": 1})
    assert reply.messages == [{"text": {"text": [SEARCH_AGAIN_TEXT]}}]


def test_only_in_range_references_resolve():
    reply = _execute({"selectedNumbers": [2, 5], "matchingDresses": CANDIDATES})

    assert reply.parameters["selectedDresses"] == [CANDIDATES[1]]
    cards = reply.messages[0]["payload"]["richContent"]
    assert len(cards) == 1
    assert reply.messages[1]["text"]["text"][0] == (
        'You selected: "Luna Ballgown". Would you like to proceed with booking, or view more dresses?'
    )


def test_no_reference_resolves():
    reply = _execute({"selectedNumbers": [0, 4, -1], "matchingDresses": CANDIDATES})
    assert reply.messages == [{"text": {"text": [INVALID_NUMBERS_TEXT]}}]
    assert reply.parameters is None


def test_singular_scalar_and_lowercase_aliases():
    assert _execute({"selectedNumber": 3.0, "matchingDresses": CANDIDATES}).parameters["selectedDresses"] == [
        CANDIDATES[2]
    ]
    assert _execute({"selectednumber": "1", "matchingDresses": CANDIDATES}).parameters["selectedDresses"] == [
        CANDIDATES[0]
    ]
    assert _execute({"selectednumbers": ["2", "x", None], "matchingDresses": CANDIDATES}).parameters[
        "selectedDresses"
    ] == [CANDIDATES[1]]


def test_plural_wins_over_singular():
    reply = _execute({"selectedNumbers": [1, 3], "selectedNumber": 2, "matchingDresses": CANDIDATES})
    assert [d["name"] for d in reply.parameters["selectedDresses"]] == ["Aurora Ballgown", "Nova Ballgown"]
    summary = reply.messages[1]["text"]["text"][0]
    assert summary.startswith('You selected: "Aurora Ballgown", "Nova Ballgown".')


def test_selected_cards_have_no_buttons():
    reply = _execute({"selectedNumbers": [3], "matchingDresses": CANDIDATES})
    image, info = reply.messages[0]["payload"]["richContent"][0]

    assert image["rawUrl"] == "https://example.com/n.jpg"
    assert info == {"type": "info", "title": "Nova Ballgown", "subtitle": "Price: $1200.5\nSatin."}


def test_existing_parameters_are_carried_forward():
    reply = _execute({"selectedNumbers": [1], "matchingDresses": CANDIDATES, "dress_size": 10})
    assert reply.parameters["dress_size"] == 10
    assert reply.parameters["matchingDresses"] == CANDIDATES


def test_damaged_candidate_list_is_not_renumbered():
    """A gap in the list must not shift later dresses into earlier positions."""
    reply = _execute({"selectedNumber": 2, "matchingDresses": [CANDIDATES[0], None, CANDIDATES[2]]})

    assert reply.messages == [{"text": {"text": [APOLOGY_TEXT]}}]
    assert reply.parameters is None


def test_candidate_without_price_is_a_fault():
    damaged = [CANDIDATES[0], {"name": "Luna Ballgown", "description": "Train."}]
    reply = _execute({"selectedNumbers": [1], "matchingDresses": damaged})
    assert reply.messages == [{"text": {"text": [APOLOGY_TEXT]}}]
