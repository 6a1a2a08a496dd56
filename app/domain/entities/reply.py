from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WebhookReply:
    messages: list[dict[str, Any]]
    parameters: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.parameters is not None:
            payload["sessionInfo"] = {"parameters": self.parameters}
        payload["fulfillment_response"] = {"messages": self.messages}
        return payload
