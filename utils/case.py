"""
Key recasing between the idiomatic snake_case argument style and the
camelCase keys the AWS JSON protocol expects on the wire.
"""
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel

from errors import InvalidKeyError, KeyCollisionError

# text and binary values are scalars on the wire
_OPAQUE_SEQUENCES = (str, bytes, bytearray, memoryview)


def recase_key(key: str, capitalize_first: bool = False) -> str:
    """
    Convert one snake_case key to camelCase.

    Every word after the first gets its first letter upper-cased; the rest of
    each word is left alone, so already-camelCase keys come back unchanged.
    With ``capitalize_first`` the first word is upper-cased too (operation names).
    """
    words = [w for w in key.split("_") if w]
    if not words:
        return key
    head = words[0]
    if capitalize_first:
        head = head[:1].upper() + head[1:]
    else:
        head = head[:1].lower() + head[1:]
    return head + "".join(w[:1].upper() + w[1:] for w in words[1:])


def normalize_key(key: Any) -> str:
    """Accept plain strings or enum members as mapping keys; reject anything else."""
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    if isinstance(key, str):
        return key
    raise InvalidKeyError(f"mapping key {key!r} must be a string, got {type(key).__name__}")


def recase(value: Any) -> Any:
    """
    Recursively rewrite mapping keys to camelCase.

    Mappings become new dicts, other sequences become new lists in the same
    order, pydantic models are dumped (unset fields dropped) and then recased.
    Every other value is returned as is.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_unset=True)
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        seen: dict[str, str] = {}
        for k, v in value.items():
            name = normalize_key(k)
            wire_key = recase_key(name)
            if wire_key in seen:
                raise KeyCollisionError(wire_key, seen[wire_key], name)
            seen[wire_key] = name
            out[wire_key] = recase(v)
        return out
    if isinstance(value, Sequence) and not isinstance(value, _OPAQUE_SEQUENCES):
        return [recase(x) for x in value]
    return value

