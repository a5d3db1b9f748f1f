from __future__ import annotations

from typing import Any

import utils
from api.context import AuthContext
from api.context import envelope_field
from api.paging import PagedCollection
from utils import FormOptions


class ChannelClient:
    """Channel management endpoints.

    ``get``, ``create`` and ``list`` unwrap the response envelope; every
    other call returns the decoded response as the server sent it. Errors
    raised by the context are never caught here.
    """

    def __init__(self, context: AuthContext) -> None:
        self.context = context

    async def get(self, channel_id: int, options: FormOptions = None) -> Any:
        """Retrieve a channel.

        With ``detail_level="minimal"`` the result is limited to id, title,
        picture, owner and locks. That is also the only level available for
        a protected channel without a valid access token.
        """
        res = await self.context.auth_request(
            "get",
            f"/channels/{channel_id}.json",
            utils.encode_form(options),
        )
        return envelope_field(res, "channel")

    async def create(self, title: str, options: FormOptions = None) -> Any:
        params = utils.options_dict(options) | {"title": title}

        res = await self.context.auth_request(
            "post",
            "/users/self/channels.json",
            utils.encode_form(params),
        )
        return envelope_field(res, "channel")

    async def edit(
        self,
        channel_id: int,
        title: str,
        options: FormOptions = None,
    ) -> Any:
        params = utils.options_dict(options) | {"title": title}

        return await self.context.auth_request(
            "put",
            f"/channels/{channel_id}.json",
            utils.encode_form(params),
        )

    async def remove(self, channel_id: int) -> Any:
        return await self.context.auth_request("delete", f"/channels/{channel_id}.json")

    async def list(self, page_size: int = 100, page: int = 1) -> PagedCollection:
        res = await self.context.auth_request(
            "get",
            f"/users/self/channels.json?pagesize={page_size}&page={page}",
        )

        return PagedCollection(
            self.context,
            "channels",
            envelope_field(res, "channels"),
            envelope_field(res, "paging"),
        )

    # password lock

    async def get_password_protection_status(self, channel_id: int) -> Any:
        return await self.context.auth_request(
            "get",
            f"/channels/{channel_id}/locks/password.json",
        )

    async def enable_password_protection(self, channel_id: int, password: str) -> Any:
        """Set the channel password, which also turns password protection on."""
        return await self.context.auth_request(
            "put",
            f"/channels/{channel_id}/locks/password.json",
            utils.encode_form({"password": password}),
        )

    async def disable_password_protection(self, channel_id: int) -> Any:
        return await self.context.auth_request(
            "delete",
            f"/channels/{channel_id}/locks/password.json",
        )

    # embed lock

    async def get_embed_lock_status(self, channel_id: int) -> Any:
        """Whether the channel may only be embedded on whitelisted domains.

        Channels can be embedded anywhere until ``set_embed_lock`` restricts
        them; ``add_url_to_whitelist`` then allows specific domains.
        """
        return await self.context.auth_request(
            "get",
            f"/channels/{channel_id}/locks/embed.json",
        )

    async def set_embed_lock(self, channel_id: int, is_embed_locked: bool) -> Any:
        return await self.context.auth_request(
            "put",
            f"/channels/{channel_id}/locks/embed.json",
            utils.encode_form({"locked": is_embed_locked}),
        )

    async def get_url_whitelist(self, channel_id: int) -> Any:
        return await self.context.auth_request(
            "get",
            f"/channels/{channel_id}/locks/embed/allowed-urls.json",
        )

    async def add_url_to_whitelist(self, channel_id: int, url: str) -> Any:
        # only takes effect while the embed lock is enabled
        return await self.context.auth_request(
            "post",
            f"/channels/{channel_id}/locks/embed/allowed-urls.json",
            utils.encode_form({"url": url}),
        )

    async def empty_url_whitelist(self, channel_id: int) -> Any:
        return await self.context.auth_request(
            "delete",
            f"/channels/{channel_id}/locks/embed/allowed-urls.json",
        )

    # settings

    async def set_sharing_control(self, channel_id: int, can_share: bool) -> Any:
        return await self.context.auth_request(
            "put",
            f"/channels/{channel_id}/settings/viewer.json",
            utils.encode_form({"sharing": can_share}),
        )

    async def set_branding_type(self, channel_id: int, type: str) -> Any:
        return await self.context.auth_request(
            "put",
            f"/channels/{channel_id}/branding.json",
            utils.encode_form({"type": type}),
        )
