from abc import ABC, abstractmethod
from typing import Any


class DocumentStorePort(ABC):
    @abstractmethod
    def list_documents(self, collection: str) -> list[dict[str, Any]]:
        """Return every document in ``collection``, in the store's iteration order."""
        raise NotImplementedError

    @abstractmethod
    def create_document(self, collection: str, data: dict[str, Any]) -> str:
        """Create one document in ``collection``. Returns the store-assigned id."""
        raise NotImplementedError
