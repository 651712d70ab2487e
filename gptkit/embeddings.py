"""Embedding requests, responses and vector helpers."""

from __future__ import annotations

import base64
import binascii
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

_FLOAT32_SIZE = 4


class VectorLengthMismatchError(ValueError):
    """Raised when two embedding vectors differ in length."""

    def __init__(self, message: str = "vector length mismatch") -> None:
        super().__init__(message)


class EmbeddingModel(str, Enum):
    """Models that can produce embedding vectors."""

    # The similarity, search and code-search models are shut down.
    ADA_SIMILARITY = "text-similarity-ada-001"
    BABBAGE_SIMILARITY = "text-similarity-babbage-001"
    CURIE_SIMILARITY = "text-similarity-curie-001"
    DAVINCI_SIMILARITY = "text-similarity-davinci-001"
    ADA_SEARCH_DOCUMENT = "text-search-ada-doc-001"
    ADA_SEARCH_QUERY = "text-search-ada-query-001"
    BABBAGE_SEARCH_DOCUMENT = "text-search-babbage-doc-001"
    BABBAGE_SEARCH_QUERY = "text-search-babbage-query-001"
    CURIE_SEARCH_DOCUMENT = "text-search-curie-doc-001"
    CURIE_SEARCH_QUERY = "text-search-curie-query-001"
    DAVINCI_SEARCH_DOCUMENT = "text-search-davinci-doc-001"
    DAVINCI_SEARCH_QUERY = "text-search-davinci-query-001"
    ADA_CODE_SEARCH_CODE = "code-search-ada-code-001"
    ADA_CODE_SEARCH_TEXT = "code-search-ada-text-001"
    BABBAGE_CODE_SEARCH_CODE = "code-search-babbage-code-001"
    BABBAGE_CODE_SEARCH_TEXT = "code-search-babbage-text-001"

    ADA_EMBEDDING_V2 = "text-embedding-ada-002"
    SMALL_EMBEDDING_3 = "text-embedding-3-small"
    LARGE_EMBEDDING_3 = "text-embedding-3-large"


class EmbeddingEncodingFormat(str, Enum):
    """Encodings the embeddings data can be returned in."""

    FLOAT = "float"
    BASE64 = "base64"


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)


@dataclass
class Embedding:
    """One embedding vector."""

    object: str = ""
    embedding: list[float] = field(default_factory=list)
    index: int = 0

    def dot_product(self, other: "Embedding") -> float:
        """Return the dot product of this vector with ``other``."""
        if len(self.embedding) != len(other.embedding):
            raise VectorLengthMismatchError()
        return sum(a * b for a, b in zip(self.embedding, other.embedding))

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Embedding":
        return cls(
            object=data.get("object") or "",
            embedding=[float(x) for x in data.get("embedding") or []],
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponse:
    """Response of a create-embeddings call."""

    object: str = ""
    data: list[Embedding] = field(default_factory=list)
    model: str = ""
    usage: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbeddingResponse":
        return cls(
            object=data.get("object") or "",
            data=[Embedding._from_dict(item or {}) for item in data.get("data") or []],
            model=data.get("model") or "",
            usage=dict(data.get("usage") or {}),
        )


def decode_base64_embedding(data: str) -> list[float]:
    """Decode base64 text holding little-endian float32 values."""
    try:
        raw = base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc
    count = len(raw) // _FLOAT32_SIZE
    return list(struct.unpack(f"<{count}f", raw[: count * _FLOAT32_SIZE]))


@dataclass
class Base64Embedding:
    """An embedding whose vector is still base64 encoded."""

    object: str = ""
    embedding: str = ""
    index: int = 0


@dataclass
class EmbeddingResponseBase64:
    """Response of a create-embeddings call made with base64 encoding."""

    object: str = ""
    data: list[Base64Embedding] = field(default_factory=list)
    model: str = ""
    usage: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbeddingResponseBase64":
        return cls(
            object=data.get("object") or "",
            data=[
                Base64Embedding(
                    object=(item or {}).get("object") or "",
                    embedding=(item or {}).get("embedding") or "",
                    index=(item or {}).get("index") or 0,
                )
                for item in data.get("data") or []
            ],
            model=data.get("model") or "",
            usage=dict(data.get("usage") or {}),
        )

    def to_embedding_response(self) -> EmbeddingResponse:
        """Decode every vector; raises ``ValueError`` on malformed base64."""
        return EmbeddingResponse(
            object=self.object,
            model=self.model,
            data=[
                Embedding(
                    object=item.object,
                    embedding=decode_base64_embedding(item.embedding),
                    index=item.index,
                )
                for item in self.data
            ],
            usage=dict(self.usage),
        )


EncodingFormat = Union[EmbeddingEncodingFormat, str]


@dataclass
class EmbeddingRequest:
    """A create-embeddings request with any kind of input."""

    input: Any = None
    model: Union[EmbeddingModel, str] = ""
    user: str = ""
    encoding_format: EncodingFormat = ""
    dimensions: int = 0

    def convert(self) -> "EmbeddingRequest":
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out optional fields that are unset."""
        out: dict[str, Any] = {"input": self.input, "model": _plain(self.model)}
        if self.user:
            out["user"] = self.user
        if self.encoding_format:
            out["encoding_format"] = _plain(self.encoding_format)
        if self.dimensions:
            out["dimensions"] = self.dimensions
        return out

    @property
    def is_base64(self) -> bool:
        return _plain(self.encoding_format) == EmbeddingEncodingFormat.BASE64.value


@dataclass
class EmbeddingRequestStrings:
    """A create-embeddings request for a list of strings."""

    input: Optional[list[str]] = None
    model: Union[EmbeddingModel, str] = ""
    user: str = ""
    encoding_format: EncodingFormat = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )


@dataclass
class EmbeddingRequestTokens:
    """A create-embeddings request for lists of token ids."""

    input: Optional[list[list[int]]] = None
    model: Union[EmbeddingModel, str] = ""
    user: str = ""
    encoding_format: EncodingFormat = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )