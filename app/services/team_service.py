import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.document import Document
from app.models.domain import Domain
from app.models.team import Team, UserTeam
from app.models.user import User
from app.schemas.common import TeamRole

logger = logging.getLogger(__name__)

DEFAULT_TEAM_NAME = "Personal Team"
DEFAULT_TEAM_PLAN = "trial"


def default_team_name(user: User) -> str:
    return f"{user.name}'s Team" if user.name else DEFAULT_TEAM_NAME


def list_user_teams(db: Session, user: User) -> list[Team]:
    """Teams the user belongs to, oldest first."""
    stmt = (
        select(Team)
        .join(UserTeam, UserTeam.team_id == Team.id)
        .where(UserTeam.user_id == user.id)
        .order_by(Team.created_at.asc(), Team.id.asc())
    )
    return list(db.scalars(stmt).all())


def create_default_team(db: Session, user: User) -> Team:
    """Create the user's personal team and move their documents and domains into it.

    Everything is written in one commit; a failure rolls back and re-raises.
    """
    try:
        documents = db.scalars(select(Document).where(Document.owner_id == user.id)).all()
        domains = db.scalars(select(Domain).where(Domain.user_id == user.id)).all()

        team = Team(
            name=default_team_name(user),
            plan=user.plan or DEFAULT_TEAM_PLAN,
            stripe_id=user.stripe_id,
            subscription_id=user.subscription_id,
            starts_at=user.starts_at,
            ends_at=user.ends_at,
        )
        team.users.append(UserTeam(user_id=user.id, role=TeamRole.admin.value))
        team.documents.extend(documents)
        team.domains.extend(domains)
        db.add(team)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info(
        "Created default team %s for user %s (%d documents, %d domains)",
        team.id, user.id, len(documents), len(domains),
    )
    return team


def get_or_create_teams(db: Session, user: User) -> list[Team]:
    teams = list_user_teams(db, user)
    if not teams:
        teams.append(create_default_team(db, user))
    return teams


def create_team(db: Session, user: User, name: str) -> Team:
    try:
        team = Team(name=name)
        team.users.append(UserTeam(user_id=user.id, role=TeamRole.admin.value))
        db.add(team)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("User %s created team %s", user.id, team.id)
    return team
