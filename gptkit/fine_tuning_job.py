"""The fine-tuning jobs API: jobs, requests and events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

from gptkit.fine_tunes import FineTuneEvent


@dataclass
class Hyperparameters:
    """Hyperparameters of a fine-tuning job; each may be a number or "auto"."""

    epochs: Any = None
    learning_rate_multiplier: Any = None
    batch_size: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.epochs is not None:
            out["n_epochs"] = self.epochs
        if self.learning_rate_multiplier is not None:
            out["learning_rate_multiplier"] = self.learning_rate_multiplier
        if self.batch_size is not None:
            out["batch_size"] = self.batch_size
        return out

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Hyperparameters":
        return cls(
            epochs=data.get("n_epochs"),
            learning_rate_multiplier=data.get("learning_rate_multiplier"),
            batch_size=data.get("batch_size"),
        )


@dataclass
class FineTuningJob:
    """A fine-tuning job."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    finished_at: int = 0
    model: str = ""
    fine_tuned_model: str = ""
    organization_id: str = ""
    status: str = ""
    hyperparameters: Hyperparameters = field(default_factory=Hyperparameters)
    training_file: str = ""
    validation_file: str = ""
    result_files: list[str] = field(default_factory=list)
    trained_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FineTuningJob":
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            finished_at=data.get("finished_at") or 0,
            model=data.get("model") or "",
            fine_tuned_model=data.get("fine_tuned_model") or "",
            organization_id=data.get("organization_id") or "",
            status=data.get("status") or "",
            hyperparameters=Hyperparameters._from_dict(data.get("hyperparameters") or {}),
            training_file=data.get("training_file") or "",
            validation_file=data.get("validation_file") or "",
            result_files=list(data.get("result_files") or []),
            trained_tokens=data.get("trained_tokens") or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "object": self.object,
            "created_at": self.created_at,
            "finished_at": self.finished_at,
            "model": self.model,
        }
        if self.fine_tuned_model:
            out["fine_tuned_model"] = self.fine_tuned_model
        out["organization_id"] = self.organization_id
        out["status"] = self.status
        out["hyperparameters"] = self.hyperparameters.to_dict()
        out["training_file"] = self.training_file
        if self.validation_file:
            out["validation_file"] = self.validation_file
        out["result_files"] = list(self.result_files)
        out["trained_tokens"] = self.trained_tokens
        return out


@dataclass
class FineTuningJobRequest:
    """A request to create a fine-tuning job."""

    training_file: str = ""
    validation_file: str = ""
    model: str = ""
    hyperparameters: Optional[Hyperparameters] = None
    suffix: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"training_file": self.training_file}
        if self.validation_file:
            out["validation_file"] = self.validation_file
        if self.model:
            out["model"] = self.model
        if self.hyperparameters is not None:
            out["hyperparameters"] = self.hyperparameters.to_dict()
        if self.suffix:
            out["suffix"] = self.suffix
        return out


@dataclass
class FineTuningJobEventList:
    """A page of events of a fine-tuning job."""

    object: str = ""
    data: list[FineTuneEvent] = field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FineTuningJobEventList":
        return cls(
            object=data.get("object") or "",
            data=[FineTuneEvent.from_dict(item or {}) for item in data.get("data") or []],
            has_more=bool(data.get("has_more")),
        )


@dataclass
class FineTuningJobEvent:
    """A single event of a fine-tuning job."""

    object: str = ""
    id: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""
    data: Any = None
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FineTuningJobEvent":
        return cls(
            object=data.get("object") or "",
            id=data.get("id") or "",
            created_at=data.get("created_at") or 0,
            level=data.get("level") or "",
            message=data.get("message") or "",
            data=data.get("data"),
            type=data.get("type") or "",
        )


def job_events_path(job_id: str, after: Optional[str] = None, limit: Optional[int] = None) -> str:
    """Return the URL path listing a job's events, with optional paging parameters."""
    params: list[tuple[str, str]] = []
    if after is not None:
        params.append(("after", after))
    if limit is not None:
        params.append(("limit", str(int(limit))))
    path = f"/fine_tuning/jobs/{job_id}/events"
    if params:
        path += "?" + urlencode(sorted(params))
    return path