"""
Encoding utilities for x402 payment headers
"""

import base64
import binascii
import json
from typing import Any, TypeVar

T = TypeVar("T")


def encode_base64(data: str | bytes) -> str:
    """Encode data to base64"""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("utf-8")


def decode_base64(data: str) -> str:
    """Decode base64 to string"""
    return base64.b64decode(data, validate=True).decode("utf-8")


def encode_payment_payload(payload: Any) -> str:
    """Encode payment payload to base64 for HTTP header"""
    if hasattr(payload, "model_dump"):
        json_str = json.dumps(payload.model_dump(by_alias=True, exclude_none=True))
    else:
        json_str = json.dumps(payload)
    return encode_base64(json_str)


def decode_payment_payload(encoded: str, model_class: type[T] | None = None) -> T | dict[str, Any]:
    """Decode payment payload from base64 HTTP header

    Raises:
        ValueError: If the header is not base64-encoded JSON
    """
    try:
        json_str = decode_base64(encoded)
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid base64 payment header: {e}") from e
    data = json.loads(json_str)
    if model_class is not None:
        return model_class(**data)
    return data
