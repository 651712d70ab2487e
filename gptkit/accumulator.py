"""Collects the raw bytes of an error payload received from the API."""

from __future__ import annotations

import io
from typing import Any


class ErrorAccumulator:
    """Accumulates error bytes into a buffer.

    The buffer must provide ``write(data)`` and ``getvalue()``; an in-memory
    ``io.BytesIO`` is used when none is given.
    """

    def __init__(self, buffer: Any = None) -> None:
        self.buffer = io.BytesIO() if buffer is None else buffer

    def write(self, data: bytes) -> None:
        """Append ``data`` to the buffer, raising ``OSError`` if it fails."""
        try:
            self.buffer.write(data)
        except Exception as exc:
            raise OSError(f"error accumulator write error, {exc}") from exc

    def getvalue(self) -> bytes:
        """Return everything written so far, or ``b""`` when nothing was."""
        value = self.buffer.getvalue()
        if not value:
            return b""
        return bytes(value)