from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SessionState:
    """Caller-managed parameter bag, round-tripped on every webhook turn."""

    parameters: dict[str, Any] = field(default_factory=dict)
    session: str | None = None

    def with_parameters(self, **updates: Any) -> dict[str, Any]:
        """Return a copy of the parameters with ``updates`` applied."""
        merged = dict(self.parameters)
        merged.update(updates)
        return merged
