from __future__ import annotations

import logging

from app.application.exceptions import MissingFieldsError
from app.application.ports.document_store import DocumentStorePort
from app.application.utils.param_aliases import MATCHING_DRESSES, resolve_search_criteria
from app.application.utils.rich_content import candidate_card, rich_content_message, text_message
from app.domain.entities.dress import CatalogItem, DressView
from app.domain.entities.reply import WebhookReply
from app.domain.entities.search_criteria import SearchCriteria
from app.domain.entities.session_state import SessionState

NO_RESULTS_TEXT = "I couldn’t find any dresses matching your criteria. Would you like to adjust your search?"
APOLOGY_TEXT = "Sorry, something went wrong while fetching the dresses."


class FindDressUseCase:
    """Match catalog dresses against the search criteria in the session parameters."""

    def __init__(
        self,
        store: DocumentStorePort,
        collection: str = "dresses",
        require_type_and_size: bool = True,
    ) -> None:
        self._store = store
        self._collection = collection
        self._require_type_and_size = require_type_and_size
        self._logger = logging.getLogger(__name__)

    def execute(self, state: SessionState) -> WebhookReply:
        try:
            self._logger.debug("Find dress request", extra={"stage": "find_dress", "session": state.session})
            try:
                criteria = resolve_search_criteria(state.parameters, self._require_type_and_size)
            except MissingFieldsError as e:
                self._logger.info(
                    "Search criteria incomplete",
                    extra={"stage": "find_dress", "session": state.session, "missing": ",".join(e.fields)},
                )
                return WebhookReply(messages=[text_message(_missing_criteria_text(e.fields))])

            matches = self.find_matches(criteria)
            self._logger.info(
                "Dress search completed",
                extra={"stage": "find_dress", "session": state.session, "match_count": len(matches)},
            )

            if not matches:
                # Null out any earlier candidate list so stale ordinals cannot resolve.
                parameters = state.with_parameters(hasDresses=False, matchingDresses=None)
                for alias in MATCHING_DRESSES.aliases:
                    if alias in parameters:
                        parameters[alias] = None
                return WebhookReply(messages=[text_message(NO_RESULTS_TEXT)], parameters=parameters)

            cards = [candidate_card(position, dress) for position, dress in enumerate(matches, start=1)]
            return WebhookReply(
                messages=[rich_content_message(cards)],
                parameters=state.with_parameters(
                    matchingDresses=[dress.to_payload() for dress in matches],
                    hasDresses=True,
                ),
            )
        except Exception as e:
            self._logger.exception(
                "Find dress webhook failed",
                extra={"stage": "find_dress", "session": state.session, "error": str(e)},
            )
            return self.apology()

    def find_matches(self, criteria: SearchCriteria) -> list[DressView]:
        """Scan the catalog in store order; no sorting is applied."""
        documents = self._store.list_documents(self._collection)
        matches: list[DressView] = []
        for document in documents:
            item = CatalogItem.from_document(document)
            if criteria.matches(item):
                matches.append(item.to_view())
        return matches

    def apology(self) -> WebhookReply:
        return WebhookReply(messages=[text_message(APOLOGY_TEXT)])


def _missing_criteria_text(fields: list[str]) -> str:
    return f"To search for dresses I still need the {' and '.join(fields)}. What are you looking for?"
