"""
utils/db.py
-----------------
This module builds the MongoDB connection for the Flask application
and wraps its collections in document stores.
"""

import logging

from flask_pymongo import PyMongo

from models.store import DocumentStore

logger = logging.getLogger(__name__)


def init_db_connection(app):
    """
    Create a PyMongo handle bound to the app.
    Reads MONGO_URI and MONGO_TIMEOUT_MS from app.config.
    """
    mongo = PyMongo(app, serverSelectionTimeoutMS=app.config["MONGO_TIMEOUT_MS"])
    logger.info("MongoDB connection initialized for %s", app.config["MONGO_URI"].rsplit("@", 1)[-1])
    return mongo


def init_stores(mongo):
    """Return (users, employees) stores for the database named in MONGO_URI."""
    db = mongo.db
    if db is None:
        raise RuntimeError("MONGO_URI must include a database name")
    return DocumentStore(db.users), DocumentStore(db.employees)


def ensure_indexes(app, *stores):
    """
    Create the unique email indexes. A failure is logged and the app keeps
    running unless MONGO_FAIL_FAST is set.
    """
    try:
        for store in stores:
            store.ensure_unique("email")
        logger.info("MongoDB connected successfully")
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        if app.config.get("MONGO_FAIL_FAST"):
            raise
