"""A small multipart/form-data writer for file uploads."""

from __future__ import annotations

import os
import secrets
from typing import IO, Any

_CHUNK_SIZE = 64 * 1024


def _escape_quotes(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _base_name(path: str) -> str:
    """Return the last element of a slash-separated path."""
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


class FormBuilder:
    """Writes multipart form data to a binary stream."""

    def __init__(self, body: IO[bytes]) -> None:
        self._body = body
        self._boundary = secrets.token_hex(30)
        self._has_parts = False

    def _start_part(self, headers: list[tuple[str, str]]) -> None:
        prefix = "\r\n" if self._has_parts else ""
        lines = [f"{prefix}--{self._boundary}\r\n"]
        lines.extend(f"{name}: {value}\r\n" for name, value in headers)
        lines.append("\r\n")
        self._body.write("".join(lines).encode("utf-8"))
        self._has_parts = True

    def _write_file_part(self, fieldname: str, reader: Any, filename: str) -> None:
        if filename == "":
            raise ValueError("filename cannot be empty")
        disposition = (
            f'form-data; name="{_escape_quotes(fieldname)}"; '
            f'filename="{_escape_quotes(filename)}"'
        )
        self._start_part(
            [
                ("Content-Disposition", disposition),
                ("Content-Type", "application/octet-stream"),
            ]
        )
        while True:
            chunk = reader.read(_CHUNK_SIZE)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            self._body.write(chunk)

    def create_form_file(self, fieldname: str, file: Any) -> None:
        """Add a file part named after ``file.name``."""
        name = getattr(file, "name", "")
        filename = os.fspath(name) if isinstance(name, (str, os.PathLike)) else ""
        self._write_file_part(fieldname, file, filename)

    def create_form_file_reader(self, fieldname: str, reader: Any, filename: str) -> None:
        """Add a file part read from ``reader`` under the base name of ``filename``."""
        self._write_file_part(fieldname, reader, _base_name(filename))

    def write_field(self, fieldname: str, value: str) -> None:
        """Add a plain text field."""
        self._start_part(
            [("Content-Disposition", f'form-data; name="{_escape_quotes(fieldname)}"')]
        )
        self._body.write(value.encode("utf-8"))

    def close(self) -> None:
        """Write the closing boundary."""
        prefix = "\r\n" if self._has_parts else ""
        self._body.write(f"{prefix}--{self._boundary}--\r\n".encode("utf-8"))

    def content_type(self) -> str:
        """Return the Content-Type header value for the form."""
        return f"multipart/form-data; boundary={self._boundary}"