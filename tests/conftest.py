from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from app.core.config import settings
from app.core.security import create_session_token
from app.db.session import Base, get_db
from app.models.document import Document
from app.models.domain import Domain
from app.models.team import Team, UserTeam
from app.models.user import User


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(**fields) -> User:
        user = User(**fields)
        db.add(user)
        db.commit()
        return user

    return _make_user


@pytest.fixture
def make_team(db):
    def _make_team(user: User, name: str, created_at: datetime | None = None, role: str = "ADMIN", **fields) -> Team:
        team = Team(name=name, **fields)
        if created_at is not None:
            team.created_at = created_at
        team.users.append(UserTeam(user_id=user.id, role=role))
        db.add(team)
        db.commit()
        return team

    return _make_team


@pytest.fixture
def add_document(db):
    def _add_document(user: User, name: str = "Deck") -> Document:
        doc = Document(name=name, file=f"/files/{name}.pdf", owner_id=user.id)
        db.add(doc)
        db.commit()
        return doc

    return _add_document


@pytest.fixture
def add_domain(db):
    def _add_domain(user: User, slug: str) -> Domain:
        domain = Domain(slug=slug, user_id=user.id)
        db.add(domain)
        db.commit()
        return domain

    return _add_domain


@pytest.fixture
def login(client):
    def _login(user: User) -> TestClient:
        client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user.id))
        return client

    return _login
