"""Shared test fixtures for authcore."""

import os
import sqlite3
import tempfile

import pytest

from authcore.config import Settings
from authcore.db import Database
from authcore.main import create_app

# Lowest bcrypt cost, keeps hashing fast in tests
TEST_WORK_FACTOR = 4


@pytest.fixture
def db_path():
    """Path to a fresh temporary SQLite file, removed after the test."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    yield path

    try:
        os.unlink(path)
    except OSError:
        pass


@pytest.fixture
def test_settings(db_path):
    return Settings(database_path=db_path, bcrypt_work_factor=TEST_WORK_FACTOR)


@pytest.fixture
def database(db_path):
    """Storage handle with the schema applied."""
    db = Database(db_path, work_factor=TEST_WORK_FACTOR)
    db.init_db()
    return db


@pytest.fixture
def core(database):
    """A Core for direct service and operations tests; commits on teardown."""
    with database.get_core() as core:
        yield core


@pytest.fixture
def raw_db(db_path):
    """Plain sqlite3 connection for inspecting stored rows."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()


@pytest.fixture
def app(test_settings, database):
    app = create_app(test_settings, database)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def registered_user(client):
    """Sign up a user through the API.

    Returns a tuple of (email, password).
    """
    email = "a@x.com"
    password = "TestPass123"
    response = client.post("/signup", json={"email": email, "password": password})
    assert response.status_code == 200
    return email, password
