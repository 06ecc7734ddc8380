"""Message envelope helpers for the VTube Studio public API."""

from __future__ import annotations

import json
import uuid
from typing import Any, Dict, Optional

from ..exceptions import ApiError, TransportError

__all__ = [
    "API_NAME",
    "API_VERSION",
    "ERROR_MESSAGE_TYPE",
    "build_request",
    "decode_message",
    "encode_message",
    "is_event",
    "new_request_id",
    "raise_for_error",
]

API_NAME = "VTubeStudioPublicAPI"
API_VERSION = "1.0"
ERROR_MESSAGE_TYPE = "APIError"


def new_request_id() -> str:
    return uuid.uuid4().hex


def build_request(
    message_type: str,
    data: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Wrap ``data`` in the request envelope."""
    message: Dict[str, Any] = {
        "apiName": API_NAME,
        "apiVersion": API_VERSION,
        "requestID": request_id or new_request_id(),
        "messageType": message_type,
    }
    if data is not None:
        message["data"] = data
    return message


def encode_message(message: Dict[str, Any]) -> str:
    return json.dumps(message, separators=(",", ":"))


def decode_message(raw: str) -> Dict[str, Any]:
    """Parse one text frame; raises ``TransportError`` when it isn't an object."""
    try:
        message = json.loads(raw)
    except ValueError as exc:
        raise TransportError(f"received malformed JSON frame: {exc}") from exc
    if not isinstance(message, dict):
        raise TransportError("received a frame that is not a JSON object")
    return message


def is_event(message: Dict[str, Any]) -> bool:
    message_type = message.get("messageType")
    return isinstance(message_type, str) and message_type.endswith("Event")


def raise_for_error(message: Dict[str, Any], request_type: Optional[str] = None) -> None:
    """Raise ``ApiError`` when ``message`` is an APIError response."""
    if message.get("messageType") != ERROR_MESSAGE_TYPE:
        return
    data = message.get("data") or {}
    raise ApiError(
        int(data.get("errorID", -1)),
        str(data.get("message", "unknown error")),
        request_type=request_type,
    )
