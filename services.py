from __future__ import annotations

import contextlib
import logging

import aiohttp

import settings
from api.channels import ChannelClient
from api.context import AuthContext

http: aiohttp.ClientSession

context: AuthContext
channels: ChannelClient

ctx_stack: contextlib.AsyncExitStack = contextlib.AsyncExitStack()


async def connect_services() -> None:
    global http, context, channels

    http = await ctx_stack.enter_async_context(
        aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=settings.REQUEST_TIMEOUT),
        ),
    )

    context = AuthContext(
        http,
        base_url=settings.API_BASE_URL,
        access_token=settings.ACCESS_TOKEN,
        token_type=settings.TOKEN_TYPE,
        client_id=settings.CLIENT_ID,
        client_secret=settings.CLIENT_SECRET,
        token_url=settings.OAUTH_TOKEN_URL,
    )
    channels = ChannelClient(context)

    logging.info(f"Connected to {settings.API_BASE_URL}.")


async def disconnect_services() -> None:
    await ctx_stack.aclose()

    logging.info("Closed http session.")
