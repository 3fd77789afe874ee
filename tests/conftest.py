import copy

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app import create_app
from config import TestConfig


class InMemoryStore:
    """Same surface as models.store.DocumentStore, backed by a dict."""

    def __init__(self):
        self.docs = {}
        self.unique_fields = set()

    def ensure_unique(self, field):
        self.unique_fields.add(field)

    def ping(self):
        return True

    def _check_unique(self, document, skip_id=None):
        for field in self.unique_fields:
            if field not in document:
                continue
            for oid, existing in self.docs.items():
                if oid != skip_id and existing.get(field) == document[field]:
                    raise DuplicateKeyError(f"E11000 duplicate key error: {field}", 11000)

    def find_all(self, query=None):
        assert not query
        return [copy.deepcopy(d) for d in self.docs.values()]

    def search(self, contains):
        results = []
        for doc in self.docs.values():
            if all(str(value).lower() in str(doc.get(field, "")).lower()
                   for field, value in contains.items() if value):
                results.append(copy.deepcopy(doc))
        return results

    def find_one(self, **fields):
        for doc in self.docs.values():
            if all(doc.get(k) == v for k, v in fields.items()):
                return copy.deepcopy(doc)
        return None

    def find_by_id(self, doc_id):
        doc = self.docs.get(ObjectId(doc_id))
        return copy.deepcopy(doc) if doc else None

    def insert(self, document):
        self._check_unique(document)
        oid = ObjectId()
        self.docs[oid] = dict(copy.deepcopy(document), _id=oid)
        return oid

    def update_by_id(self, doc_id, changes, return_updated=True):
        oid = ObjectId(doc_id)
        doc = self.docs.get(oid)
        if doc is None:
            return None
        self._check_unique(changes, skip_id=oid)
        before = copy.deepcopy(doc)
        doc.update(copy.deepcopy(changes))
        return copy.deepcopy(doc) if return_updated else before

    def delete_by_id(self, doc_id):
        return self.docs.pop(ObjectId(doc_id), None)


def make_store():
    store = InMemoryStore()
    store.ensure_unique("email")
    return store


@pytest.fixture
def user_store():
    return make_store()


@pytest.fixture
def employee_store():
    return make_store()


@pytest.fixture
def unindexed_store():
    # Stands in for a database whose unique indexes were never created
    return InMemoryStore()


@pytest.fixture
def superseded():
    return []


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(user_store, employee_store, superseded, upload_dir):
    config = type("Config", (TestConfig,), {"UPLOAD_FOLDER": str(upload_dir)})
    return create_app(
        config,
        user_store=user_store,
        employee_store=employee_store,
        on_image_superseded=superseded.append,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    client.post("/api/v1/user/signup", json={
        "username": "admin", "email": "admin@x.com", "password": "secret1",
    })
    resp = client.post("/api/v1/user/login", json={"email": "admin@x.com", "password": "secret1"})
    return {"Authorization": f"Bearer {resp.get_json()['jwt_token']}"}


@pytest.fixture
def employee_fields():
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@x.com",
        "position": "Software Engineer",
        "salary": "85000",
        "date_of_joining": "2024-01-15",
        "department": "Engineering",
    }
