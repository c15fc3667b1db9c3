import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import errorhandler, method_not_allowed
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.team_schema import TeamCreate, TeamOut, TeamSummary
from app.services.team_service import create_team, get_or_create_teams

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teams", tags=["teams"])

ALLOWED_METHODS = ["GET", "POST"]


@router.get("", response_model=list[TeamSummary])
def list_teams(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    try:
        teams = get_or_create_teams(db, current_user)
    except SQLAlchemyError as exc:
        logger.error("Failed to list teams for user %s. Error: %s", current_user.id, exc, exc_info=True)
        return errorhandler(exc)
    return [TeamSummary.model_validate(t) for t in teams]


@router.post("", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
def add_team(
    payload: TeamCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        team = create_team(db, current_user, payload.team)
    except SQLAlchemyError as exc:
        logger.error("Failed to create team for user %s. Error: %s", current_user.id, exc, exc_info=True)
        return errorhandler(exc)
    return TeamOut.model_validate(team)


@router.api_route(
    "",
    methods=["PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT"],
    include_in_schema=False,
)
def reject_method(request: Request):
    return method_not_allowed(request.method, ALLOWED_METHODS)
