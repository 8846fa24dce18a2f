"""Bloc Team — membres avec photo, nom, rôle."""
from typing import List, Literal
from pydantic import BaseModel, Field
from .base import BlockContent

BLOCK_TYPE: Literal["team"] = "team"
LABEL = "Team Members"


class TeamMember(BaseModel):
    name: str
    role: str = ""
    image: str = ""


class TeamContent(BlockContent):
    heading: str = "Meet the Team"
    members: List[TeamMember] = Field(default_factory=lambda: [
        TeamMember(name="Alex Doe", role="CEO", image="https://i.pravatar.cc/150?u=a"),
        TeamMember(name="Sam Smith", role="CTO", image="https://i.pravatar.cc/150?u=b"),
        TeamMember(name="Jordan Lee", role="Designer", image="https://i.pravatar.cc/150?u=c"),
        TeamMember(name="Casey West", role="Developer", image="https://i.pravatar.cc/150?u=d"),
    ])
