from __future__ import annotations

import copy
import logging
import uuid
from typing import Any

from app.application.ports.document_store import DocumentStorePort


class MemoryDocumentStore(DocumentStorePort):
    def __init__(self, collections: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._logger = logging.getLogger(__name__)
        for name, documents in (collections or {}).items():
            for document in documents:
                self.create_document(name, document)

    def list_documents(self, collection: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._collections.get(collection, {}).values()]

    def create_document(self, collection: str, data: dict[str, Any]) -> str:
        document_id = uuid.uuid4().hex
        self._collections.setdefault(collection, {})[document_id] = copy.deepcopy(data)
        self._logger.debug("Document created", extra={"collection": collection, "document_id": document_id})
        return document_id

    def get_document(self, collection: str, document_id: str) -> dict[str, Any] | None:
        document = self._collections.get(collection, {}).get(document_id)
        return copy.deepcopy(document) if document is not None else None

    def count(self, collection: str) -> int:
        return len(self._collections.get(collection, {}))
