"""Building HTTP requests with JSON bodies."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import Any, Mapping

_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~0123456789"
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _encode_default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONMarshaller:
    """Encodes values as compact UTF-8 JSON."""

    def marshal(self, value: Any) -> bytes:
        return json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=_encode_default
        ).encode("utf-8")


class JSONUnmarshaler:
    """Decodes JSON documents."""

    def unmarshal(self, data: bytes | str) -> Any:
        return json.loads(data)


@dataclass
class Request:
    """An HTTP request ready to be sent."""

    method: str
    url: str
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


class RequestBuilder:
    """Creates ``Request`` objects, marshalling non-binary bodies to JSON."""

    def __init__(self, marshaller: Any = None) -> None:
        self.marshaller = JSONMarshaller() if marshaller is None else marshaller

    def build(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        payload: bytes | None
        if body is None:
            payload = None
        elif isinstance(body, (bytes, bytearray, memoryview)):
            payload = bytes(body)
        elif callable(getattr(body, "getvalue", None)):
            payload = bytes(body.getvalue())
        elif callable(getattr(body, "read", None)):
            payload = bytes(body.read())
        else:
            payload = self.marshaller.marshal(body)

        method = method or "GET"
        if not all(char in _TOKEN_CHARS for char in method):
            raise ValueError(f"invalid method {method!r}")
        if any(ord(char) < 0x20 or ord(char) == 0x7F for char in url):
            raise ValueError(f"invalid control character in URL {url!r}")

        return Request(
            method=method,
            url=url,
            body=payload,
            headers=dict(headers) if headers is not None else {},
        )