from enum import Enum


class TeamRole(str, Enum):
    admin = "ADMIN"
    manager = "MANAGER"
    member = "MEMBER"
