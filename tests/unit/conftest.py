# tests/unit/conftest.py
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from timetrack.main import app
from timetrack.db import Base, get_db
from timetrack.dependencies import get_today
from timetrack import models
from timetrack.enums import ProjectStatus
from timetrack.auth import create_access_token, get_password_hash

# One in-memory DB shared across threads (TestClient) via StaticPool
engine = create_engine(
    "sqlite+pysqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enforce FKs in SQLite (off by default otherwise) and let SQLAlchemy
# drive BEGIN so SAVEPOINTs behave
@event.listens_for(engine, "connect")
def _set_sqlite_pragma(dbapi_connection, _):
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@event.listens_for(engine, "begin")
def _do_begin(conn):
    conn.exec_driver_sql("BEGIN")


TestingSessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    join_transaction_mode="create_savepoint",
)
Base.metadata.create_all(bind=engine)

TODAY = date(2024, 5, 15)


@pytest.fixture
def connection():
    conn = engine.connect()
    tx = conn.begin()
    try:
        yield conn
    finally:
        tx.rollback()
        conn.close()

@pytest.fixture
def db_session(connection):
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def _override_dependencies(db_session):
    def _get_db():
        yield db_session
    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)


def _make_user(db_session, email):
    user = models.User(
        email=email,
        password_hash=get_password_hash("testpass123")
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    """Create the user most tests act as"""
    return _make_user(db_session, "test@example.com")


@pytest.fixture
def auth_headers(test_user):
    """Create authentication headers with JWT token"""
    token = create_access_token(data={"sub": test_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_user(db_session):
    """Create another user for testing isolation"""
    return _make_user(db_session, "other@example.com")


@pytest.fixture
def other_headers(other_user):
    token = create_access_token(data={"sub": other_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_client(db_session):
    """Factory creating a client row for a user"""
    def _make(user, name="ACME Corp"):
        db_client = models.Client(name=name, user_id=user.id)
        db_session.add(db_client)
        db_session.commit()
        db_session.refresh(db_client)
        return db_client
    return _make


@pytest.fixture
def make_project(db_session):
    """Factory creating a project row for a user's client"""
    def _make(user, db_client, name="Website", status=None):
        project = models.Project(
            name=name,
            client_id=db_client.id,
            user_id=user.id,
            status=status or ProjectStatus.COMPLETED
        )
        db_session.add(project)
        db_session.commit()
        db_session.refresh(project)
        return project
    return _make
