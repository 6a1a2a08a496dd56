from __future__ import annotations

import logging

from app.application.utils.param_aliases import resolve_selection_request
from app.application.utils.rich_content import rich_content_message, selected_card, text_message
from app.domain.entities.dress import DressView
from app.domain.entities.reply import WebhookReply
from app.domain.entities.session_state import SessionState

SEARCH_AGAIN_TEXT = "Sorry, I couldn't find the dresses you previously viewed. Please search again!"
INVALID_NUMBERS_TEXT = "Those numbers don't match any dresses in the list, please try again!"
APOLOGY_TEXT = "Sorry, something went wrong while selecting the dress(es)."


def resolve_ordinals(ordinals: list[int], candidates: list[DressView]) -> list[DressView]:
    """
    Map 1-based ordinal references onto the candidate list.

    Out-of-range references are dropped. Input order and repeats are kept, so
    ``[2, 2]`` yields the second candidate twice.
    """
    return [candidates[n - 1] for n in ordinals if 1 <= n <= len(candidates)]


class SelectDressUseCase:
    """Resolve the user's numbered picks against the last search results."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def execute(self, state: SessionState) -> WebhookReply:
        try:
            request = resolve_selection_request(state.parameters)
            self._logger.debug(
                "Select dress request",
                extra={"stage": "select_dress", "session": state.session, "ordinals": str(request.ordinals)},
            )

            if not request.candidates:
                self._logger.info(
                    "No candidate list in session",
                    extra={"stage": "select_dress", "session": state.session},
                )
                return WebhookReply(messages=[text_message(SEARCH_AGAIN_TEXT)])

            selected = resolve_ordinals(request.ordinals, request.candidates)
            if not selected:
                self._logger.info(
                    "Selection did not resolve",
                    extra={"stage": "select_dress", "session": state.session, "ordinals": str(request.ordinals)},
                )
                return WebhookReply(messages=[text_message(INVALID_NUMBERS_TEXT)])

            self._logger.info(
                "Dresses selected",
                extra={"stage": "select_dress", "session": state.session, "selected_count": len(selected)},
            )
            return WebhookReply(
                messages=[
                    rich_content_message([selected_card(dress) for dress in selected]),
                    text_message(_summary_text(selected)),
                ],
                parameters=state.with_parameters(selectedDresses=[dress.to_payload() for dress in selected]),
            )
        except Exception as e:
            self._logger.exception(
                "Select dress webhook failed",
                extra={"stage": "select_dress", "session": state.session, "error": str(e)},
            )
            return self.apology()

    def apology(self) -> WebhookReply:
        return WebhookReply(messages=[text_message(APOLOGY_TEXT)])


def _summary_text(selected: list[DressView]) -> str:
    names = ", ".join(f'"{dress.name}"' for dress in selected)
    return f"You selected: {names}. Would you like to proceed with booking, or view more dresses?"
