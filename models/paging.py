from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict


class PageLink(BaseModel):
    model_config = ConfigDict(extra="allow")

    href: str
    page: Optional[int] = None


class PagingInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    actual: Optional[PageLink] = None
    previous: Optional[PageLink] = None
    next: Optional[PageLink] = None

    page_size: Optional[int] = None
    item_count: Optional[int] = None

    @property
    def page(self) -> Optional[int]:
        if self.actual is None:
            return None

        return self.actual.page
