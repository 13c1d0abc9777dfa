"""
Builds transport-ready request descriptors for the AWS Support JSON API.
Payload keys arrive in snake_case and leave as camelCase; nothing here performs I/O.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import BaseModel

from config import settings
from errors import ParameterShapeError, UnknownOperationError
from schemas.request import RequestDescriptor
from schemas.support import Operation
from utils.case import normalize_key, recase, recase_key

logger = logging.getLogger(__name__)

CONTENT_TYPE_HEADER = "content-type"

OperationName = Union[Operation, str]


def resolve_operation(operation: OperationName) -> Operation:
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        raise UnknownOperationError(str(operation)) from None


def wire_operation_name(operation: OperationName) -> str:
    """``describe_cases`` -> ``DescribeCases``."""
    return recase_key(resolve_operation(operation).value, capitalize_first=True)


def target_header_value(operation: OperationName) -> str:
    return f"{settings.target_prefix}.{wire_operation_name(operation)}"


def as_payload(payload: Any) -> dict[str, Any]:
    """
    Normalize a top-level argument bag to a dict.
    Accepts None, a mapping, a pydantic model (unset fields dropped) or an
    iterable of (key, value) pairs.
    """
    if payload is None:
        return {}
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_unset=True)
    if isinstance(payload, Mapping):
        return dict(payload)
    if isinstance(payload, (str, bytes)) or not isinstance(payload, Iterable):
        raise ParameterShapeError(f"arguments must be a mapping or key/value pairs, got {type(payload).__name__}")

    out: dict[Any, Any] = {}
    for item in payload:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise ParameterShapeError(f"expected a (key, value) pair, got {item!r}")
        key, value = item
        if key in out:
            raise ParameterShapeError(f"duplicate argument {normalize_key(key)!r}")
        out[key] = value
    return out


def merge_arguments(opts: Any, **fields: Any) -> dict[str, Any]:
    """
    Merge fixed arguments into an optional bag. Fields set to None are left
    out; the rest replace any bag entry that maps to the same wire key.
    """
    present = {k: v for k, v in fields.items() if v is not None}
    overridden = {recase_key(k) for k in present}
    merged = {
        k: v for k, v in as_payload(opts).items()
        if recase_key(normalize_key(k)) not in overridden
    }
    merged.update(present)
    return merged


def build_request(operation: OperationName, payload: Any = None) -> RequestDescriptor:
    """
    Recase ``payload`` and wrap it with the target and content-type headers
    for ``operation``.
    """
    op = resolve_operation(operation)
    target = target_header_value(op)
    body = recase(as_payload(payload))
    logger.debug("Built %s request for %s", op.value, target)
    return RequestDescriptor(
        method="POST",
        headers=(
            (settings.target_header, target),
            (CONTENT_TYPE_HEADER, settings.content_type),
        ),
        body=body,
        service=settings.service,
    )
