#!/usr/bin/env python3
"""Smoke test for the dress webhooks against a running server."""

import json
import sys
from typing import Any

import httpx


BASE_URL = "http://127.0.0.1:8001"
SESSION = "projects/demo/locations/global/agents/demo/sessions/smoke"


def _post(path: str, parameters: dict[str, Any]) -> dict[str, Any] | None:
    payload = {"sessionInfo": {"parameters": parameters, "session": SESSION}}
    try:
        response = httpx.post(f"{BASE_URL}{path}", json=payload, timeout=30.0)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return None

    data = response.json()
    for message in data["fulfillment_response"]["messages"]:
        if "text" in message:
            print(f"  text: {message['text']['text'][0]}")
        else:
            print(f"  cards: {len(message['payload']['richContent'])}")
    return data


def run_find(dress_type: str, size: int) -> dict[str, Any] | None:
    print("=" * 60)
    print("POST /webhooks/find-dress")
    print("=" * 60)
    data = _post(
        "/webhooks/find-dress",
        {"dress_type": dress_type, "dress_size": size, "dress_min_price": 0, "dress_max_price": 5000},
    )
    if data and data.get("sessionInfo"):
        return data["sessionInfo"]["parameters"]
    return None


def run_select(parameters: dict[str, Any]) -> dict[str, Any] | None:
    print("\n" + "=" * 60)
    print("POST /webhooks/select-dress")
    print("=" * 60)
    data = _post("/webhooks/select-dress", {**parameters, "selectedNumbers": [1]})
    if data and data.get("sessionInfo"):
        return data["sessionInfo"]["parameters"]
    return None


def run_book(parameters: dict[str, Any]) -> None:
    print("\n" + "=" * 60)
    print("POST /webhooks/book-appointment")
    print("=" * 60)
    data = _post(
        "/webhooks/book-appointment",
        {
            **parameters,
            "customer_name": "Smoke Test",
            "email": "smoke@example.com",
            "appointment_date": {"year": 2025, "month": 11, "day": 8},
            "appointment_time": {"hours": 14, "minutes": 30},
        },
    )
    if data and data.get("sessionInfo"):
        print(json.dumps(data["sessionInfo"]["parameters"], indent=2, ensure_ascii=False))


def main():
    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn app.main:app --reload --port 8001")
        sys.exit(1)

    dress_type = sys.argv[1] if len(sys.argv) > 1 else "ballgown"
    size = int(sys.argv[2]) if len(sys.argv) > 2 else 10

    parameters = run_find(dress_type, size)
    if not parameters or not parameters.get("hasDresses"):
        print("\nNo dresses found; seed the catalog collection and retry.")
        return
    parameters = run_select(parameters)
    if parameters:
        run_book(parameters)


if __name__ == "__main__":
    main()
