"""File upload requests and file descriptions returned by the API."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

from gptkit.forms import FormBuilder

BuilderFactory = Callable[[Any], Any]


class PurposeType(str, Enum):
    """What an uploaded file is for."""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"


def _plain(value: Any) -> str:
    return str(getattr(value, "value", value))


@dataclass
class FileRequest:
    """An upload of a local file."""

    file_name: str = ""
    file_path: str = ""
    purpose: str = ""


@dataclass
class FileBytesRequest:
    """An upload of in-memory bytes under a given name."""

    name: str = ""
    bytes: bytes = b""
    purpose: Union[PurposeType, str] = ""


@dataclass
class File:
    """A file stored by the API."""

    bytes: int = 0
    created_at: int = 0
    id: str = ""
    file_name: str = ""
    object: str = ""
    status: str = ""
    purpose: str = ""
    status_details: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "File":
        return cls(
            bytes=data.get("bytes") or 0,
            created_at=data.get("created_at") or 0,
            id=data.get("id") or "",
            file_name=data.get("filename") or "",
            object=data.get("object") or "",
            status=data.get("status") or "",
            purpose=data.get("purpose") or "",
            status_details=data.get("status_details") or "",
        )


@dataclass
class FilesList:
    """The files that belong to the user or organisation."""

    files: list[File] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FilesList":
        return cls(files=[File.from_dict(item or {}) for item in data.get("data") or []])


def _factory(builder_factory: Optional[BuilderFactory]) -> BuilderFactory:
    return FormBuilder if builder_factory is None else builder_factory


def build_file_bytes_form(
    request: FileBytesRequest, builder_factory: Optional[BuilderFactory] = None
) -> tuple[bytes, str]:
    """Encode an upload of raw bytes; return the form body and its content type."""
    body = io.BytesIO()
    builder = _factory(builder_factory)(body)
    builder.write_field("purpose", _plain(request.purpose))
    builder.create_form_file_reader("file", io.BytesIO(request.bytes), request.name)
    builder.close()
    return body.getvalue(), builder.content_type()


def build_file_form(
    request: FileRequest, builder_factory: Optional[BuilderFactory] = None
) -> tuple[bytes, str]:
    """Encode an upload of a local file; return the form body and its content type."""
    body = io.BytesIO()
    builder = _factory(builder_factory)(body)
    builder.write_field("purpose", _plain(request.purpose))
    with open(request.file_path, "rb") as handle:
        builder.create_form_file("file", handle)
    builder.close()
    return body.getvalue(), builder.content_type()