from __future__ import annotations

from starlette.config import Config

cfg = Config(".env")

API_BASE_URL = cfg("API_BASE_URL", default="https://api.ustream.tv")
OAUTH_TOKEN_URL = cfg("OAUTH_TOKEN_URL", default="https://www.ustream.tv/oauth2/token")

ACCESS_TOKEN = cfg("ACCESS_TOKEN", default=None)
TOKEN_TYPE = cfg("TOKEN_TYPE", default="Bearer")

CLIENT_ID = cfg("CLIENT_ID", default=None)
CLIENT_SECRET = cfg("CLIENT_SECRET", default=None)

REQUEST_TIMEOUT = cfg("REQUEST_TIMEOUT", cast=float, default=30.0)

LOG_LEVEL = cfg("LOG_LEVEL", cast=int, default=30)
