from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .common import TeamRole


class _CamelModel(BaseModel):
    # Serialize as camelCase for the frontend, read from ORM attributes
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class TeamSummary(_CamelModel):
    id: str
    name: str


class UserTeamOut(_CamelModel):
    user_id: str
    team_id: str
    role: TeamRole
    created_at: datetime


class TeamOut(_CamelModel):
    id: str
    name: str
    plan: str
    stripe_id: Optional[str] = None
    subscription_id: Optional[str] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    users: list[UserTeamOut] = []


class TeamCreate(BaseModel):
    team: str = Field(..., max_length=100)

    @field_validator("team")
    @classmethod
    def team_name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("team name must not be blank")
        return v
