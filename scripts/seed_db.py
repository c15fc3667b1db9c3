from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import create_session_token
from app.db.session import SessionLocal, engine, init_db
from app.models.document import Document
from app.models.domain import Domain
from app.models.user import User


DEMO_USER_ID = "demo0000000000000000000000000001"  # stable id for idempotence


def seed_user(db: Session) -> User:
    user = db.get(User, DEMO_USER_ID)
    if user is None:
        user = User(id=DEMO_USER_ID, name="Demo", email="demo@teams.local", plan="free")
        db.add(user)
    return user


def seed_documents(db: Session, user: User) -> None:
    items: Sequence[tuple[str, str, str]] = [
        ("demo0000000000000000000000000d01", "Pitch deck", "/files/pitch-deck.pdf"),
        ("demo0000000000000000000000000d02", "Financials", "/files/financials.pdf"),
    ]
    for doc_id, name, file in items:
        if db.get(Document, doc_id) is None:
            db.add(Document(id=doc_id, name=name, file=file, owner_id=user.id))


def seed_domains(db: Session, user: User) -> None:
    domain_id = "demo0000000000000000000000000e01"
    if db.get(Domain, domain_id) is None:
        db.add(Domain(id=domain_id, slug="docs.teams.local", user_id=user.id))


def main() -> None:
    init_db()
    with SessionLocal() as db:
        user = seed_user(db)
        seed_documents(db, user)
        seed_domains(db, user)
        db.commit()
        token = create_session_token(user.id)

    print("Database seed completed.")
    print(f"Set cookie {settings.SESSION_COOKIE_NAME}={token}")
    engine.dispose()


if __name__ == "__main__":
    main()
