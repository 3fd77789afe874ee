import re

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument


def contains_filter(criteria):
    """
    Build a Mongo filter matching each non-empty value as a case-insensitive
    substring of its field. Values are matched literally.
    """
    query = {}
    for field, value in criteria.items():
        if value:
            query[field] = {"$regex": re.escape(value), "$options": "i"}
    return query


class DocumentStore:
    """Thin adapter over a single pymongo collection."""

    def __init__(self, collection):
        self.collection = collection

    def ensure_unique(self, field):
        return self.collection.create_index([(field, ASCENDING)], unique=True)

    def ping(self):
        self.collection.database.client.admin.command("ping")
        return True

    def find_all(self, query=None):
        return list(self.collection.find(query or {}))

    def search(self, contains):
        return self.find_all(contains_filter(contains))

    def find_one(self, **fields):
        return self.collection.find_one(fields)

    def find_by_id(self, doc_id):
        return self.collection.find_one({"_id": ObjectId(doc_id)})

    def insert(self, document):
        result = self.collection.insert_one(document)
        return result.inserted_id

    def update_by_id(self, doc_id, changes, return_updated=True):
        return self.collection.find_one_and_update(
            {"_id": ObjectId(doc_id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER if return_updated else ReturnDocument.BEFORE,
        )

    def delete_by_id(self, doc_id):
        return self.collection.find_one_and_delete({"_id": ObjectId(doc_id)})
