from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any
from typing import Optional

import aiohttp

import utils
from api.errors import AuthenticationError
from api.errors import ResponseShapeError
from api.errors import TransportError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# verbs whose parameters travel in the query string
QUERY_METHODS = frozenset({"GET", "DELETE", "HEAD"})


def envelope_field(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict) or key not in payload:
        raise ResponseShapeError(f"Response is missing the {key!r} field.")

    return payload[key]


def _decode_error_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


class AuthContext:
    """Performs authenticated requests against the REST API.

    Either a fixed ``access_token`` is given, or a ``client_id`` and
    ``client_secret`` from which a client-credentials token is fetched on
    first use and again whenever it expires.
    """

    def __init__(
        self,
        http: aiohttp.ClientSession,
        base_url: str,
        access_token: Optional[str] = None,
        token_type: str = "Bearer",
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        token_url: Optional[str] = None,
    ) -> None:
        self.http = http
        self.base_url = base_url.rstrip("/")

        self.access_token = access_token
        self.token_type = token_type
        self.token_expiry: Optional[float] = None

        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url

    def resolve_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path

        return f"{self.base_url}/{path.lstrip('/')}"

    def token_expired(self) -> bool:
        return self.token_expiry is not None and time.monotonic() >= self.token_expiry

    async def authorization(self) -> str:
        if self.access_token is None or self.token_expired():
            await self.fetch_token()

        return f"{self.token_type} {self.access_token}"

    async def fetch_token(self) -> None:
        if not (self.client_id and self.client_secret and self.token_url):
            raise AuthenticationError(
                "No valid access token and no client credentials to request one.",
            )

        try:
            async with self.http.post(
                self.token_url,
                data=utils.encode_form({"grant_type": "client_credentials"}),
                headers={"Content-Type": FORM_CONTENT_TYPE},
                auth=aiohttp.BasicAuth(self.client_id, self.client_secret),
            ) as response:
                status = response.status
                text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise AuthenticationError(f"Token request failed: {exc}") from exc

        if status != 200:
            raise AuthenticationError(f"Token endpoint returned {status}: {text}")

        try:
            token = json.loads(text)
        except ValueError as exc:
            raise AuthenticationError("Token endpoint returned invalid JSON.") from exc

        if not isinstance(token, dict) or "access_token" not in token:
            raise AuthenticationError("Token endpoint response has no access_token.")

        self.access_token = token["access_token"]
        self.token_type = token.get("token_type", self.token_type)

        if expires_in := token.get("expires_in"):
            self.token_expiry = time.monotonic() + float(expires_in)
        else:
            self.token_expiry = None

        logging.info("Fetched new access token.")

    async def auth_request(
        self,
        method: str,
        path: str,
        body: Optional[str] = None,
    ) -> Any:
        method = method.upper()
        url = self.resolve_url(path)

        headers = {
            "Authorization": await self.authorization(),
            "Accept": "application/json",
        }

        data = None
        if method in QUERY_METHODS:
            url = utils.with_query(url, body)
        elif body is not None:
            data = body
            headers["Content-Type"] = FORM_CONTENT_TYPE

        start = time.perf_counter_ns()
        try:
            async with self.http.request(
                method,
                url,
                data=data,
                headers=headers,
            ) as response:
                status = response.status
                text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        elapsed = utils.format_time(time.perf_counter_ns() - start)
        logging.debug(f"{method} {url} -> {status} ({elapsed})")

        if not 200 <= status < 300:
            logging.warning(f"{method} {url} returned {status}.")
            raise TransportError(
                f"{method} {url} returned {status}",
                status=status,
                body=_decode_error_body(text),
            )

        if not text.strip():
            return None

        try:
            return json.loads(text)
        except ValueError as exc:
            raise ResponseShapeError(f"{method} {url} returned invalid JSON.") from exc
