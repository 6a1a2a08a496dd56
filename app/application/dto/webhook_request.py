from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.session_state import SessionState


class SessionInfoDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parameters: dict[str, Any] | None = None
    session: str | None = None


class WebhookRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    session_info: SessionInfoDTO = Field(alias="sessionInfo")

    def to_session_state(self) -> SessionState:
        return SessionState(
            parameters=dict(self.session_info.parameters or {}),
            session=self.session_info.session,
        )
