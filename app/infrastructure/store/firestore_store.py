from __future__ import annotations

import logging
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore

from app.application.exceptions import DocumentStoreError
from app.application.ports.document_store import DocumentStorePort


class FirestoreDocumentStore(DocumentStorePort):
    def __init__(self, project_id: str | None = None, client: firestore.Client | None = None) -> None:
        self._project_id = project_id
        self._client = client
        self._logger = logging.getLogger(__name__)

    def _get_client(self) -> firestore.Client:
        # Created on first use so credential problems surface inside a request, not at wiring time.
        if self._client is None:
            self._client = firestore.Client(project=self._project_id)
        return self._client

    def list_documents(self, collection: str) -> list[dict[str, Any]]:
        try:
            snapshots = self._get_client().collection(collection).stream()
            return [snapshot.to_dict() or {} for snapshot in snapshots]
        except google_exceptions.GoogleAPIError as e:
            raise DocumentStoreError(f"Failed to read collection {collection!r}: {e}") from e

    def create_document(self, collection: str, data: dict[str, Any]) -> str:
        try:
            _, doc_ref = self._get_client().collection(collection).add(data)
        except google_exceptions.GoogleAPIError as e:
            raise DocumentStoreError(f"Failed to write to collection {collection!r}: {e}") from e
        self._logger.info("Firestore document created", extra={"collection": collection, "document_id": doc_ref.id})
        return doc_ref.id
