"""
JSON document helper tests.
"""

import json

import pytest
from pydantic import TypeAdapter

from landlordly.core.ports.storage import DocumentCorruptError
from landlordly.core.services.documents import load_or_seed, read_document, write_document
from landlordly.domain.entities import InviteCode, Unit

INVITES = TypeAdapter(list[InviteCode])
UNITS = TypeAdapter(list[Unit])


class TestReadDocument:
    def test_absent_key(self, store) -> None:
        assert read_document(store, "invites", INVITES) is None

    def test_valid_document(self, store) -> None:
        store.set_item("invites", '[{"code": "AB12CD", "used": true}]')

        assert read_document(store, "invites", INVITES) == [InviteCode(code="AB12CD", used=True)]

    @pytest.mark.parametrize("raw", ["not json", "{}", '[{"used": false}]'])
    def test_corrupt_document(self, store, raw: str) -> None:
        store.set_item("invites", raw)

        with pytest.raises(DocumentCorruptError) as exc_info:
            read_document(store, "invites", INVITES)

        assert exc_info.value.key == "invites"


class TestWriteDocument:
    def test_camel_case_without_nulls(self, store) -> None:
        unit = Unit(id="7", property_id="1", unit_number="7A", rent_amount=1800)

        write_document(store, "units", UNITS, [unit])

        stored = json.loads(store.get_item("units"))
        assert stored == [
            {"id": "7", "propertyId": "1", "unitNumber": "7A", "rentAmount": 1800.0, "status": "vacant"}
        ]

    def test_written_document_reads_back(self, store) -> None:
        invites = [InviteCode(code="AAAA"), InviteCode(code="BBBB", used=True)]

        write_document(store, "invites", INVITES, invites)

        assert read_document(store, "invites", INVITES) == invites


class TestLoadOrSeed:
    def test_seed_persisted_once(self, store) -> None:
        seed = [InviteCode(code="SEED")]

        assert load_or_seed(store, "invites", INVITES, seed) == seed
        store.set_item("invites", "[]")

        assert load_or_seed(store, "invites", INVITES, seed) == []

    def test_empty_list_is_not_reseeded(self, store) -> None:
        store.set_item("invites", "[]")

        assert load_or_seed(store, "invites", INVITES, [InviteCode(code="SEED")]) == []
