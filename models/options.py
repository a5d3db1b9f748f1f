from __future__ import annotations

from typing import Literal
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict


class RetrieveOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    # "minimal" limits the result to id, title, picture, owner and locks,
    # and is the only level readable on a protected channel without a token
    detail_level: Optional[Literal["minimal"]] = None


class CreateOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    description: Optional[str] = None


class EditOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    description: Optional[str] = None
    tags: Optional[str] = None  # comma separated
