from __future__ import annotations

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Any

from app.application.exceptions import DocumentStoreError
from app.application.ports.document_store import DocumentStorePort


class JsonDocumentStore(DocumentStorePort):
    """File-backed store: one JSON object per collection, keyed by document id."""

    def __init__(self, data_dir: str = "./data/collections") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, collection: str) -> threading.Lock:
        """Get or create a lock for a collection."""
        with self._lock_lock:
            if collection not in self._locks:
                self._locks[collection] = threading.Lock()
            return self._locks[collection]

    def _get_file_path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _load_collection(self, collection: str) -> dict[str, dict[str, Any]]:
        file_path = self._get_file_path(collection)
        if not file_path.exists():
            return {}
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise DocumentStoreError(f"Failed to read collection {collection!r}: {e}") from e
        if not isinstance(data, dict):
            raise DocumentStoreError(f"Collection file for {collection!r} is not a JSON object")
        return data

    def _save_collection(self, collection: str, data: dict[str, dict[str, Any]]) -> None:
        """Save collection data to JSON file atomically."""
        file_path = self._get_file_path(collection)
        temp_path = file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise DocumentStoreError(f"Failed to write collection {collection!r}: {e}") from e

    def list_documents(self, collection: str) -> list[dict[str, Any]]:
        with self._get_lock(collection):
            return list(self._load_collection(collection).values())

    def create_document(self, collection: str, data: dict[str, Any]) -> str:
        document_id = uuid.uuid4().hex
        with self._get_lock(collection):
            documents = self._load_collection(collection)
            documents[document_id] = data
            self._save_collection(collection, documents)
        self._logger.debug("Document created", extra={"collection": collection, "document_id": document_id})
        return document_id
