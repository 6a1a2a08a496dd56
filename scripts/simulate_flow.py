#!/usr/bin/env python3
"""
Local conversation harness (no HTTP, no Dialogflow).

Usage:
  python3 scripts/simulate_flow.py [dress_type] [size] [selection...]

Runs find -> select -> book through the same use cases the webhooks use,
round-tripping session parameters the way the agent would, against an
in-memory store seeded with a demo catalog.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.book_appointment import BookAppointmentUseCase
from app.application.use_cases.find_dress import FindDressUseCase
from app.application.use_cases.select_dress import SelectDressUseCase
from app.domain.entities.reply import WebhookReply
from app.domain.entities.session_state import SessionState
from app.infrastructure.store.memory_store import MemoryDocumentStore

DEMO_CATALOG = [
    {
        "name": "Aurora Ballgown",
        "price": 1500,
        "description": "Tulle skirt with a beaded bodice.",
        "image_url": "https://example.com/aurora.jpg",
        "type": "ballgown",
        "size_available": [8, 10, 12],
        "in_stock": True,
    },
    {
        "name": "Luna Ballgown",
        "price": 1850,
        "description": "Cathedral train and lace sleeves.",
        "image_url": "https://example.com/luna.jpg",
        "type": "Ballgown",
        "size_available": [10, 14],
        "in_stock": True,
    },
    {
        "name": "Stella Mermaid",
        "price": 900,
        "description": "Fitted lace silhouette.",
        "image_url": "https://example.com/stella.jpg",
        "type": "mermaid",
        "size_available": [6, 10],
        "in_stock": True,
    },
]


def _print_reply(stage: str, reply: WebhookReply) -> None:
    print(f"\n[{stage}]")
    print("-" * 60)
    for message in reply.messages:
        if "text" in message:
            print(message["text"]["text"][0])
            continue
        for card in message["payload"]["richContent"]:
            info = card[1]
            print(f"{info['title']}  ({info['subtitle'].splitlines()[0]})")


def main() -> None:
    dress_type = sys.argv[1] if len(sys.argv) > 1 else "ballgown"
    size = int(sys.argv[2]) if len(sys.argv) > 2 else 10
    selection = [int(n) for n in sys.argv[3:]] or [1]

    store = MemoryDocumentStore({"dresses": DEMO_CATALOG})
    session = "local-session"

    reply = FindDressUseCase(store=store).execute(
        SessionState(parameters={"dress_type": dress_type, "dress_size": size}, session=session)
    )
    _print_reply("find-dress", reply)
    if not reply.parameters or not reply.parameters.get("hasDresses"):
        return

    parameters = {**reply.parameters, "selectedNumbers": selection}
    reply = SelectDressUseCase().execute(SessionState(parameters=parameters, session=session))
    _print_reply("select-dress", reply)
    if not reply.parameters:
        return

    parameters = {
        **reply.parameters,
        "customer_name": "Local Tester",
        "email": "tester@example.com",
        "appointment_date": {"year": 2025, "month": 11, "day": 8},
        "appointment_time": {"hours": 14, "minutes": 30},
    }
    reply = BookAppointmentUseCase(store=store).execute(SessionState(parameters=parameters, session=session))
    _print_reply("book-appointment", reply)

    if reply.parameters:
        record = store.get_document("bookings", reply.parameters["bookingId"])
        print("\nStored booking:")
        print(json.dumps(record, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
