"""
Tests for the document store adapters.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from app.application.exceptions import DocumentStoreError
from app.infrastructure.store.json_store import JsonDocumentStore
from app.infrastructure.store.memory_store import MemoryDocumentStore


def test_memory_store_keeps_insertion_order_and_isolates_copies():
    store = MemoryDocumentStore({"dresses": [{"name": "A"}, {"name": "B"}]})

    documents = store.list_documents("dresses")
    assert [d["name"] for d in documents] == ["A", "B"]

    documents[0]["name"] = "mutated"
    assert store.list_documents("dresses")[0]["name"] == "A"
    assert store.list_documents("missing") == []


def test_memory_store_assigns_unique_ids():
    store = MemoryDocumentStore()
    first = store.create_document("bookings", {"n": 1})
    second = store.create_document("bookings", {"n": 1})

    assert first != second
    assert store.get_document("bookings", first) == {"n": 1}
    assert store.count("bookings") == 2


def test_json_store_persists_across_instances():
    """Documents written by one store instance are visible to a fresh one."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonDocumentStore(data_dir=tmpdir)
        booking_id = store.create_document("bookings", {"customer": {"name": "Jane"}, "total_price": 1500})

        reopened = JsonDocumentStore(data_dir=tmpdir)
        assert reopened.list_documents("bookings") == [{"customer": {"name": "Jane"}, "total_price": 1500}]

        on_disk = json.loads((Path(tmpdir) / "bookings.json").read_text(encoding="utf-8"))
        assert list(on_disk) == [booking_id]
        assert not (Path(tmpdir) / "bookings.json.tmp").exists()


def test_json_store_reads_seeded_catalog():
    with tempfile.TemporaryDirectory() as tmpdir:
        catalog = {
            "d1": {"name": "Aurora Ballgown", "price": 1500},
            "d2": {"name": "Luna Ballgown", "price": 2500},
        }
        (Path(tmpdir) / "dresses.json").write_text(json.dumps(catalog), encoding="utf-8")

        store = JsonDocumentStore(data_dir=tmpdir)
        assert [d["name"] for d in store.list_documents("dresses")] == ["Aurora Ballgown", "Luna Ballgown"]


def test_json_store_corrupted_file_raises_store_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        (Path(tmpdir) / "dresses.json").write_text("{not json", encoding="utf-8")
        store = JsonDocumentStore(data_dir=tmpdir)

        with pytest.raises(DocumentStoreError):
            store.list_documents("dresses")
