import logging

import pytest
from flask import Flask
from pymongo.errors import ServerSelectionTimeoutError

from config import TestConfig
from utils.db import ensure_indexes


class UnreachableStore:
    def ensure_unique(self, field):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")


def make_app(fail_fast):
    app = Flask(__name__)
    app.config.from_object(TestConfig)
    app.config["MONGO_FAIL_FAST"] = fail_fast
    return app


def test_index_failure_is_logged_and_startup_continues(caplog):
    with caplog.at_level(logging.ERROR, logger="utils.db"):
        ensure_indexes(make_app(False), UnreachableStore())

    assert "Database connection failed" in caplog.text


def test_index_failure_is_raised_when_failing_fast():
    with pytest.raises(ServerSelectionTimeoutError):
        ensure_indexes(make_app(True), UnreachableStore())


def test_unique_email_index_on_every_store(user_store, employee_store):
    user_store.unique_fields.clear()
    employee_store.unique_fields.clear()

    ensure_indexes(make_app(True), user_store, employee_store)

    assert user_store.unique_fields == {"email"}
    assert employee_store.unique_fields == {"email"}
