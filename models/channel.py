from __future__ import annotations

from typing import Any
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict


class ChannelOwner(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    username: Optional[str] = None
    picture: Optional[str] = None


class ChannelLocks(BaseModel):
    model_config = ConfigDict(extra="allow")

    embed: Optional[bool] = None
    password: Optional[bool] = None


class Channel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: Optional[str] = None
    description: Optional[str] = None

    tags: list[str] = []
    picture: dict[str, Any] = {}

    owner: Optional[ChannelOwner] = None
    locks: Optional[ChannelLocks] = None

    def __repr__(self) -> str:
        return f"<{self.title} ({self.id})>"
