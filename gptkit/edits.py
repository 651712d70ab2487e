"""Requests and responses of the (deprecated) edits endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class EditsRequest:
    """A request to the edits endpoint."""

    model: Optional[str] = None
    input: str = ""
    instruction: str = ""
    n: int = 0
    temperature: float = 0.0
    top_p: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out fields that are unset."""
        out: dict[str, Any] = {}
        if self.model is not None:
            out["model"] = self.model
        fields = [
            ("input", self.input),
            ("instruction", self.instruction),
            ("n", self.n),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
        ]
        out.update((key, value) for key, value in fields if value)
        return out


@dataclass
class EditsChoice:
    """One of the possible edits."""

    text: str = ""
    index: int = 0


@dataclass
class EditsResponse:
    """A response from the edits endpoint."""

    object: str = ""
    created: int = 0
    usage: dict[str, Any] = field(default_factory=dict)
    choices: list[EditsChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditsResponse":
        return cls(
            object=data.get("object") or "",
            created=data.get("created") or 0,
            usage=dict(data.get("usage") or {}),
            choices=[
                EditsChoice(text=(c or {}).get("text") or "", index=(c or {}).get("index") or 0)
                for c in data.get("choices") or []
            ],
        )