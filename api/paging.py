from __future__ import annotations

from typing import Any
from typing import Iterator
from typing import Mapping

from pydantic import ValidationError

from api.context import AuthContext
from api.context import envelope_field
from api.errors import PagingError
from api.errors import ResponseShapeError
from models.paging import PageLink
from models.paging import PagingInfo


def parse_paging(paging: Any) -> PagingInfo:
    if not isinstance(paging, Mapping):
        raise ResponseShapeError(f"Paging metadata is not an object: {paging!r}")

    try:
        return PagingInfo.model_validate(paging)
    except ValidationError as exc:
        raise ResponseShapeError(f"Malformed paging metadata: {exc}") from exc


class PagedCollection:
    """One page of a list endpoint, along with the links to its neighbours."""

    def __init__(
        self,
        context: AuthContext,
        resource_name: str,
        items: list[Any],
        paging: Mapping[str, Any],
    ) -> None:
        self.context = context
        self.resource_name = resource_name
        self.items = items
        self.paging = paging
        self.paging_info = parse_paging(paging)

    def __repr__(self) -> str:
        return f"<{self.resource_name} page {self.paging_info.page} ({len(self.items)} items)>"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, idx: int) -> Any:
        return self.items[idx]

    def has_next_page(self) -> bool:
        return self.paging_info.next is not None

    def has_previous_page(self) -> bool:
        return self.paging_info.previous is not None

    async def next_page(self) -> PagedCollection:
        if self.paging_info.next is None:
            raise PagingError(f"{self.resource_name} has no next page.")

        return await self._fetch(self.paging_info.next)

    async def previous_page(self) -> PagedCollection:
        if self.paging_info.previous is None:
            raise PagingError(f"{self.resource_name} has no previous page.")

        return await self._fetch(self.paging_info.previous)

    async def _fetch(self, link: PageLink) -> PagedCollection:
        res = await self.context.auth_request("get", link.href)

        return PagedCollection(
            self.context,
            self.resource_name,
            envelope_field(res, self.resource_name),
            envelope_field(res, "paging"),
        )
