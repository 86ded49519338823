"""Form encoding for request parameters.

Nested mappings flatten to ``key[sub]`` and sequences to ``key[0]``, ``key[1]``.
Spaces encode as ``%20``, never ``+``.
"""

from __future__ import annotations

import enum
import numbers
import urllib.parse
from collections.abc import Mapping
from typing import Any

from connect_oauth.errors import InvalidRequestError


def _scalar_to_str(key: str, value: Any) -> str:
    if value is None:
        return ""
    # bool is a Number; check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _scalar_to_str(key, value.value)
    if isinstance(value, (str, numbers.Number)):
        return str(value)
    raise InvalidRequestError(
        f"Cannot encode parameter {key!r}: unsupported type {type(value).__name__}",
        param=key,
    )


def _flatten(key: str, value: Any, out: list[tuple[str, str]], parents: set[int]) -> None:
    if isinstance(value, (Mapping, list, tuple)):
        if id(value) in parents:
            raise InvalidRequestError(
                f"Cannot encode parameter {key!r}: it contains itself",
                param=key,
            )
        parents.add(id(value))
        try:
            if isinstance(value, Mapping):
                for sub_key, sub_value in value.items():
                    if not isinstance(sub_key, str):
                        raise InvalidRequestError(
                            f"Parameter keys must be strings, got {sub_key!r} under {key!r}",
                            param=f"{key}[{sub_key!r}]",
                        )
                    _flatten(f"{key}[{sub_key}]", sub_value, out, parents)
            else:
                if not value:
                    out.append((key, ""))
                for index, item in enumerate(value):
                    _flatten(f"{key}[{index}]", item, out, parents)
        finally:
            parents.discard(id(value))
    else:
        out.append((key, _scalar_to_str(key, value)))


def flatten_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered (key, value) string pairs.

    Raises:
        InvalidRequestError: If a key is not a string, a value has a type
            that has no form representation, or a container contains itself.
    """
    pairs: list[tuple[str, str]] = []
    if not params:
        return pairs
    parents = {id(params)}
    for key, value in params.items():
        if not isinstance(key, str):
            raise InvalidRequestError(
                f"Parameter keys must be strings, got {key!r}", param=repr(key),
            )
        _flatten(key, value, pairs, parents)
    return pairs


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Encode parameters as a query string / form body.

    Brackets added by flattening stay literal in keys; every reserved
    character in values is percent-escaped.
    """
    return "&".join(
        f"{urllib.parse.quote(key, safe='[]')}={urllib.parse.quote(value, safe='')}"
        for key, value in flatten_params(params)
    )
