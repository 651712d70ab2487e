"""Errors reported by the API and by the HTTP layer."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _load(data: str | bytes | bytearray) -> Any:
    return json.loads(data, parse_constant=_reject_constant)


def _string(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ValueError(f"cannot decode {name}: expected string, got {type(value).__name__}")


def _message(value: Any) -> str:
    if value is None or isinstance(value, str):
        return value or ""
    if isinstance(value, list):
        return ", ".join(_string(item, "message item") for item in value)
    raise ValueError(f"cannot decode message: got {type(value).__name__}")


def _code(value: Any) -> Any:
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        if _INT64_MIN <= value <= _INT64_MAX:
            return value
        return float(value)
    return value


@dataclass
class InnerError:
    """Azure content-filtering details."""

    code: str = ""
    content_filter_results: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def _from_value(cls, value: Any) -> Optional["InnerError"]:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError(f"cannot decode innererror: got {type(value).__name__}")
        results = value.get("content_filter_result")
        if results is not None and not isinstance(results, dict):
            raise ValueError("cannot decode content_filter_result: expected object")
        return cls(
            code=_string(value.get("code"), "innererror code"),
            content_filter_results=dict(results or {}),
        )


@dataclass(eq=False)
class APIError(Exception):
    """An error returned by the API."""

    code: Any = None
    message: str = ""
    param: Optional[str] = None
    type: str = ""
    http_status: str = ""
    http_status_code: int = 0
    inner_error: Optional[InnerError] = None

    def __str__(self) -> str:
        if self.http_status_code > 0:
            return (
                f"error, status code: {self.http_status_code}, "
                f"status: {self.http_status}, message: {self.message}"
            )
        return self.message

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> "APIError":
        """Parse an API error object; raises ``ValueError`` on malformed input."""
        return cls._from_value(_load(data))

    @classmethod
    def _from_value(cls, raw: Any) -> "APIError":
        if not isinstance(raw, dict):
            raise ValueError("cannot decode API error: expected object")
        if "message" not in raw:
            raise ValueError("cannot decode API error: missing message")
        error = cls(message=_message(raw["message"]))
        if "type" in raw:
            error.type = _string(raw["type"], "type")
        if "innererror" in raw:
            error.inner_error = InnerError._from_value(raw["innererror"])
        if "param" in raw:
            param = raw["param"]
            if param is not None and not isinstance(param, str):
                raise ValueError("cannot decode param: expected string")
            error.param = param
        if "code" in raw:
            error.code = _code(raw["code"])
        return error


@dataclass(eq=False)
class RequestError(Exception):
    """A generic failure of an HTTP request."""

    http_status: str = ""
    http_status_code: int = 0
    err: Optional[BaseException] = None
    body: bytes = b""

    def __post_init__(self) -> None:
        self.__cause__ = self.err

    def __str__(self) -> str:
        message = str(self.err) if self.err is not None else "<nil>"
        body = self.body.decode("utf-8", errors="replace")
        return (
            f"error, status code: {self.http_status_code}, status: {self.http_status}, "
            f"message: {message}, body: {body}"
        )


@dataclass
class ErrorResponse:
    """The envelope the API wraps errors in."""

    error: Optional[APIError] = None

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> "ErrorResponse":
        raw = _load(data)
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError("cannot decode error response: expected object")
        value = raw.get("error")
        if value is None:
            return cls()
        return cls(error=APIError._from_value(value))