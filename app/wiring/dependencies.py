import logging

from app.application.ports.document_store import DocumentStorePort
from app.application.use_cases.book_appointment import BookAppointmentUseCase
from app.application.use_cases.find_dress import FindDressUseCase
from app.application.use_cases.select_dress import SelectDressUseCase
from app.core.config import settings
from app.infrastructure.store.json_store import JsonDocumentStore
from app.infrastructure.store.memory_store import MemoryDocumentStore


_document_store: DocumentStorePort | None = None


def get_document_store() -> DocumentStorePort:
    global _document_store
    if _document_store is None:
        provider = settings.STORE_PROVIDER.lower()
        logger = logging.getLogger(__name__)
        if provider == "firestore":
            from app.infrastructure.store.firestore_store import FirestoreDocumentStore

            _document_store = FirestoreDocumentStore(project_id=settings.FIRESTORE_PROJECT_ID)
        elif provider == "json":
            _document_store = JsonDocumentStore(data_dir=settings.DATA_DIR)
        elif provider == "memory":
            _document_store = MemoryDocumentStore()
        else:
            raise ValueError(f"Unknown STORE_PROVIDER: {settings.STORE_PROVIDER}")
        logger.info("Document store initialized", extra={"provider": provider})
    return _document_store


def get_find_dress_use_case() -> FindDressUseCase:
    return FindDressUseCase(
        store=get_document_store(),
        collection=settings.DRESSES_COLLECTION,
        require_type_and_size=settings.REQUIRE_DRESS_TYPE_AND_SIZE,
    )


def get_select_dress_use_case() -> SelectDressUseCase:
    return SelectDressUseCase()


def get_book_appointment_use_case() -> BookAppointmentUseCase:
    return BookAppointmentUseCase(
        store=get_document_store(),
        collection=settings.BOOKINGS_COLLECTION,
    )
