# tests/conftest.py
"""
Shared fixtures: a fake Firestore client so nothing touches the network.
"""
import itertools
from unittest.mock import MagicMock, patch

import pytest

from carfleet import config


class FakeFirestore:
    """
    Stand-in for firestore.Client: hands out auto-id document references
    and records what each batch staged and whether it was committed.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self.batches = []
        self.collections = []

    def collection(self, name):
        self.collections.append(name)
        coll = MagicMock(name=f"collection:{name}")
        coll.document.side_effect = self._new_document
        return coll

    def _new_document(self):
        ref = MagicMock(name="document")
        ref.id = f"auto-{next(self._ids)}"
        return ref

    def batch(self):
        batch = MagicMock(name="batch")
        self.batches.append(batch)
        return batch

    def staged(self):
        """(doc_id, payload) for every set() on a committed batch."""
        writes = []
        for batch in self.batches:
            if not batch.commit.called:
                continue
            for call in batch.set.call_args_list:
                ref, payload = call.args
                writes.append((ref.id, payload))
        return writes


@pytest.fixture(autouse=True)
def reset_client():
    config.reset_db()
    yield
    config.reset_db()


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def mock_firebase(fake_db):
    """Patch firebase_admin so get_db() returns fake_db."""
    with patch('carfleet.config.firebase_admin') as mock_admin, \
         patch('carfleet.config.credentials') as mock_credentials, \
         patch('carfleet.config.firestore') as mock_firestore:
        mock_admin._apps = {}
        mock_firestore.client.return_value = fake_db
        yield {
            "firebase_admin": mock_admin,
            "credentials": mock_credentials,
            "firestore": mock_firestore,
        }


@pytest.fixture
def key_file(tmp_path):
    path = tmp_path / "serviceAccountKey.json"
    path.write_text('{"type": "service_account"}', encoding="utf-8")
    return str(path)
