from __future__ import annotations

from typing import Any
from typing import Mapping
from typing import Optional
from typing import Union
from urllib.parse import quote

from pydantic import BaseModel

FormOptions = Union[Mapping[str, Any], BaseModel, None]


def options_dict(options: FormOptions) -> dict[str, Any]:
    """Return a fresh dict of the options, dropping unset model fields."""
    if options is None:
        return {}

    if isinstance(options, BaseModel):
        return options.model_dump(exclude_none=True)

    return dict(options)


def _encode_scalar(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"

    return str(value)


def _flatten(prefix: str, value: Any) -> list[tuple[str, str]]:
    # unset options are left out rather than sent as "key="
    if value is None:
        return []

    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)

    if isinstance(value, Mapping):
        pairs = []
        for key, inner in value.items():
            pairs.extend(_flatten(f"{prefix}[{key}]", inner))
        return pairs

    if isinstance(value, (list, tuple)):
        pairs = []
        for idx, inner in enumerate(value):
            pairs.extend(_flatten(f"{prefix}[{idx}]", inner))
        return pairs

    return [(prefix, _encode_scalar(value))]


def encode_form(options: FormOptions) -> str:
    # nested keys are bracketed: {"a": {"b": 1}} -> a%5Bb%5D=1
    pairs = []
    for key, value in options_dict(options).items():
        pairs.extend(_flatten(str(key), value))

    return "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in pairs)


def with_query(path: str, query: Optional[str]) -> str:
    if not query:
        return path

    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


TIME_ORDER_SUFFIXES = ("ns", "μs", "ms", "s")


def format_time(time: Union[int, float]) -> str:
    for suffix in TIME_ORDER_SUFFIXES:
        if time < 1000:
            break

        time /= 1000

    return f"{time:.2f}{suffix}"  # type: ignore
