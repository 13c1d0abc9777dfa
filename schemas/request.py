from __future__ import annotations

import base64
import json
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from errors import ParameterShapeError


def _encode_blob(value: Any) -> str:
    """Blobs travel as base64 text in the AWS JSON protocol."""
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RequestDescriptor(BaseModel):
    """One outbound Support API call: method, ordered headers and camelCase body."""

    method: Literal["POST"] = "POST"
    headers: tuple[tuple[str, str], ...]
    body: dict[str, Any] = Field(default_factory=dict)
    service: str = "support"

    model_config = {"frozen": True}

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def target(self) -> str:
        # headers[0] is always the target header
        return self.headers[0][1]

    def json_body(self) -> bytes:
        text = json.dumps(
            self.body,
            default=_encode_blob,
            ensure_ascii=False,
            separators=(",", ":"),
        )
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParameterShapeError(f"body is not valid UTF-8 text: {e.reason} at position {e.start}") from e
