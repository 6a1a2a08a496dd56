from __future__ import annotations

import pytest
from google.api_core import exceptions as google_exceptions

from app.application.exceptions import DocumentStoreError
from app.infrastructure.store.firestore_store import FirestoreDocumentStore


class FakeSnapshot:
    def __init__(self, data):
        self._data = data

    def to_dict(self):
        return self._data


class FakeDocRef:
    def __init__(self, doc_id):
        self.id = doc_id


class FakeCollection:
    def __init__(self, documents, fail: bool = False):
        self._documents = documents
        self._fail = fail
        self.added = []

    def stream(self):
        if self._fail:
            raise google_exceptions.ServiceUnavailable("firestore down")
        return iter(FakeSnapshot(d) for d in self._documents)

    def add(self, data):
        if self._fail:
            raise google_exceptions.DeadlineExceeded("timed out")
        self.added.append(data)
        return None, FakeDocRef(f"doc{len(self.added)}")


class FakeClient:
    def __init__(self, collections):
        self._collections = collections

    def collection(self, name):
        return self._collections.setdefault(name, FakeCollection([]))


def test_list_documents_streams_collection():
    client = FakeClient({"dresses": FakeCollection([{"name": "A"}, None, {"name": "B"}])})
    store = FirestoreDocumentStore(client=client)

    assert store.list_documents("dresses") == [{"name": "A"}, {}, {"name": "B"}]


def test_create_document_returns_assigned_id():
    bookings = FakeCollection([])
    store = FirestoreDocumentStore(client=FakeClient({"bookings": bookings}))

    assert store.create_document("bookings", {"status": "confirmed"}) == "doc1"
    assert bookings.added == [{"status": "confirmed"}]


def test_google_errors_are_wrapped():
    store = FirestoreDocumentStore(client=FakeClient({"dresses": FakeCollection([], fail=True)}))

    with pytest.raises(DocumentStoreError):
        store.list_documents("dresses")
    with pytest.raises(DocumentStoreError):
        store.create_document("dresses", {})
