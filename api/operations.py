from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException

from errors import ParameterShapeError, UnknownOperationError
from schemas.request import RequestDescriptor
from schemas.support import Operation
from services.request_builder import build_request, target_header_value

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/operations", tags=["operations"])


def _descriptor_to_response(descriptor: RequestDescriptor) -> dict[str, Any]:
    """Serialize a descriptor the way it would go on the wire (blobs base64-encoded)."""
    return {
        "service": descriptor.service,
        "method": descriptor.method,
        "headers": [[name, value] for name, value in descriptor.headers],
        "body": json.loads(descriptor.json_body()),
    }


@router.get("")
async def list_operations():
    return [{"name": op.value, "target": target_header_value(op)} for op in Operation]


@router.post("/{operation}")
async def preview_request(operation: str, arguments: Optional[dict[str, Any]] = Body(None)):
    """Assemble the request for ``operation`` from snake_case arguments without sending it."""
    try:
        descriptor = build_request(operation, arguments or {})
        response = _descriptor_to_response(descriptor)
    except UnknownOperationError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ParameterShapeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    logger.info("Previewed %s", descriptor.target)
    return response
