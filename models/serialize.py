from datetime import date, datetime

from bson import ObjectId


def serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return serialize_document(value)
    if isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def serialize_document(doc):
    """Make a Mongo document safe for jsonify (ObjectIds and dates become strings)."""
    return {key: serialize_value(value) for key, value in doc.items()}
