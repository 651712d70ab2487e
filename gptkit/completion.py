"""Requests and responses of the text completion endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

O1_MINI = "o1-mini"
O1_MINI_20240912 = "o1-mini-2024-09-12"
O1_PREVIEW = "o1-preview"
O1_PREVIEW_20240912 = "o1-preview-2024-09-12"
O1 = "o1"
O1_20241217 = "o1-2024-12-17"
O3_MINI = "o3-mini"
O3_MINI_20250131 = "o3-mini-2025-01-31"
GPT4_32K_0613 = "gpt-4-32k-0613"
GPT4_32K_0314 = "gpt-4-32k-0314"
GPT4_32K = "gpt-4-32k"
GPT4_0613 = "gpt-4-0613"
GPT4_0314 = "gpt-4-0314"
GPT4O = "gpt-4o"
GPT4O_20240513 = "gpt-4o-2024-05-13"
GPT4O_20240806 = "gpt-4o-2024-08-06"
GPT4O_20241120 = "gpt-4o-2024-11-20"
GPT4O_LATEST = "chatgpt-4o-latest"
GPT4O_MINI = "gpt-4o-mini"
GPT4O_MINI_20240718 = "gpt-4o-mini-2024-07-18"
GPT4_TURBO = "gpt-4-turbo"
GPT4_TURBO_20240409 = "gpt-4-turbo-2024-04-09"
GPT4_TURBO_0125 = "gpt-4-0125-preview"
GPT4_TURBO_1106 = "gpt-4-1106-preview"
GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
GPT4_VISION_PREVIEW = "gpt-4-vision-preview"
GPT4 = "gpt-4"
GPT4_DOT5_PREVIEW = "gpt-4.5-preview"
GPT4_DOT5_PREVIEW_20250227 = "gpt-4.5-preview-2025-02-27"
GPT3_DOT5_TURBO_0125 = "gpt-3.5-turbo-0125"
GPT3_DOT5_TURBO_1106 = "gpt-3.5-turbo-1106"
GPT3_DOT5_TURBO_0613 = "gpt-3.5-turbo-0613"
GPT3_DOT5_TURBO_0301 = "gpt-3.5-turbo-0301"
GPT3_DOT5_TURBO_16K = "gpt-3.5-turbo-16k"
GPT3_DOT5_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
GPT3_DOT5_TURBO = "gpt-3.5-turbo"
GPT3_DOT5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
# The following models are shut down.
GPT3_TEXT_DAVINCI_003 = "text-davinci-003"
GPT3_TEXT_DAVINCI_002 = "text-davinci-002"
GPT3_TEXT_CURIE_001 = "text-curie-001"
GPT3_TEXT_BABBAGE_001 = "text-babbage-001"
GPT3_TEXT_ADA_001 = "text-ada-001"
GPT3_TEXT_DAVINCI_001 = "text-davinci-001"
GPT3_DAVINCI_INSTRUCT_BETA = "davinci-instruct-beta"
GPT3_DAVINCI = "davinci"
GPT3_DAVINCI_002 = "davinci-002"
GPT3_CURIE_INSTRUCT_BETA = "curie-instruct-beta"
GPT3_CURIE = "curie"
GPT3_CURIE_002 = "curie-002"
GPT3_ADA = "ada"
GPT3_ADA_002 = "ada-002"
GPT3_BABBAGE = "babbage"
GPT3_BABBAGE_002 = "babbage-002"

CODEX_CODE_DAVINCI_002 = "code-davinci-002"
CODEX_CODE_CUSHMAN_001 = "code-cushman-001"
CODEX_CODE_DAVINCI_001 = "code-davinci-001"

COMPLETIONS_SUFFIX = "/completions"
CHAT_COMPLETIONS_SUFFIX = "/chat/completions"

_DISABLED_MODELS: dict[str, frozenset[str]] = {
    COMPLETIONS_SUFFIX: frozenset(
        {
            O1_MINI, O1_MINI_20240912, O1_PREVIEW, O1_PREVIEW_20240912,
            O3_MINI, O3_MINI_20250131,
            GPT3_DOT5_TURBO, GPT3_DOT5_TURBO_0301, GPT3_DOT5_TURBO_0613,
            GPT3_DOT5_TURBO_1106, GPT3_DOT5_TURBO_0125, GPT3_DOT5_TURBO_16K,
            GPT3_DOT5_TURBO_16K_0613,
            GPT4, GPT4_DOT5_PREVIEW, GPT4_DOT5_PREVIEW_20250227,
            GPT4O, GPT4O_20240513, GPT4O_20240806, GPT4O_20241120, GPT4O_LATEST,
            GPT4O_MINI, GPT4O_MINI_20240718,
            GPT4_TURBO_PREVIEW, GPT4_VISION_PREVIEW, GPT4_TURBO_1106, GPT4_TURBO_0125,
            GPT4_TURBO, GPT4_TURBO_20240409,
            GPT4_0314, GPT4_0613, GPT4_32K, GPT4_32K_0314, GPT4_32K_0613,
        }
    ),
    CHAT_COMPLETIONS_SUFFIX: frozenset(
        {
            CODEX_CODE_DAVINCI_002, CODEX_CODE_CUSHMAN_001, CODEX_CODE_DAVINCI_001,
            GPT3_TEXT_DAVINCI_003, GPT3_TEXT_DAVINCI_002, GPT3_TEXT_CURIE_001,
            GPT3_TEXT_BABBAGE_001, GPT3_TEXT_ADA_001, GPT3_TEXT_DAVINCI_001,
            GPT3_DAVINCI_INSTRUCT_BETA, GPT3_DAVINCI, GPT3_CURIE_INSTRUCT_BETA,
            GPT3_CURIE, GPT3_ADA, GPT3_BABBAGE,
        }
    ),
}


class CompletionStreamNotSupportedError(ValueError):
    """Raised when a streaming request is sent to the non-streaming call."""

    def __init__(self, message: str = "streaming is not supported with this method") -> None:
        super().__init__(message)


class CompletionUnsupportedModelError(ValueError):
    """Raised when the model cannot be used with the completion endpoint."""

    def __init__(self, message: str = "this model is not supported with this method") -> None:
        super().__init__(message)


class CompletionPromptTypeError(TypeError):
    """Raised when the prompt is neither a string nor a list of strings."""

    def __init__(self, message: str = "the type of CompletionRequest.Prompt only supports string and []string") -> None:
        super().__init__(message)


def endpoint_supports_model(endpoint: str, model: str) -> bool:
    """Return whether ``model`` may be used with ``endpoint``."""
    return model not in _DISABLED_MODELS.get(endpoint, frozenset())


def is_valid_prompt(prompt: Any) -> bool:
    """Return whether ``prompt`` is a string or a list of strings."""
    if isinstance(prompt, str):
        return True
    if isinstance(prompt, (list, tuple)):
        return all(isinstance(item, str) for item in prompt)
    return False


@dataclass
class CompletionRequest:
    """A request to the completion endpoint."""

    model: str = ""
    prompt: Any = None
    best_of: int = 0
    echo: bool = False
    frequency_penalty: float = 0.0
    logit_bias: Optional[dict[str, int]] = None
    store: bool = False
    metadata: Optional[dict[str, str]] = None
    logprobs: int = 0
    max_tokens: int = 0
    n: int = 0
    presence_penalty: float = 0.0
    seed: Optional[int] = None
    stop: Optional[list[str]] = None
    stream: bool = False
    suffix: str = ""
    temperature: float = 0.0
    top_p: float = 0.0
    user: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out fields that are unset."""
        out: dict[str, Any] = {"model": self.model}
        if self.prompt is not None:
            out["prompt"] = list(self.prompt) if isinstance(self.prompt, tuple) else self.prompt
        optional = [
            ("best_of", self.best_of),
            ("echo", self.echo),
            ("frequency_penalty", self.frequency_penalty),
            ("logit_bias", dict(self.logit_bias) if self.logit_bias else None),
            ("store", self.store),
            ("metadata", dict(self.metadata) if self.metadata else None),
            ("logprobs", self.logprobs),
            ("max_tokens", self.max_tokens),
            ("n", self.n),
            ("presence_penalty", self.presence_penalty),
        ]
        out.update((key, value) for key, value in optional if value)
        if self.seed is not None:
            out["seed"] = self.seed
        rest = [
            ("stop", list(self.stop) if self.stop else None),
            ("stream", self.stream),
            ("suffix", self.suffix),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
            ("user", self.user),
        ]
        out.update((key, value) for key, value in rest if value)
        return out


def check_completion_request(request: CompletionRequest) -> dict[str, Any]:
    """Check that ``request`` can be sent and return its JSON body."""
    if request.stream:
        raise CompletionStreamNotSupportedError()
    if not endpoint_supports_model(COMPLETIONS_SUFFIX, request.model):
        raise CompletionUnsupportedModelError()
    if not is_valid_prompt(request.prompt):
        raise CompletionPromptTypeError()
    return request.to_dict()


@dataclass
class LogprobResult:
    """Log probabilities of the tokens of one choice."""

    tokens: list[str] = field(default_factory=list)
    token_logprobs: list[float] = field(default_factory=list)
    top_logprobs: list[dict[str, float]] = field(default_factory=list)
    text_offset: list[int] = field(default_factory=list)


@dataclass
class CompletionChoice:
    """One of the possible completions."""

    text: str = ""
    index: int = 0
    finish_reason: str = ""
    logprobs: LogprobResult = field(default_factory=LogprobResult)


def _logprobs_from(data: Any) -> LogprobResult:
    data = data or {}
    return LogprobResult(
        tokens=list(data.get("tokens") or []),
        token_logprobs=list(data.get("token_logprobs") or []),
        top_logprobs=[dict(item or {}) for item in data.get("top_logprobs") or []],
        text_offset=list(data.get("text_offset") or []),
    )


def _choice_from(data: dict[str, Any]) -> CompletionChoice:
    return CompletionChoice(
        text=data.get("text") or "",
        index=data.get("index") or 0,
        finish_reason=data.get("finish_reason") or "",
        logprobs=_logprobs_from(data.get("logprobs")),
    )


@dataclass
class CompletionResponse:
    """A response from the completion endpoint."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[CompletionChoice] = field(default_factory=list)
    usage: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompletionResponse":
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[_choice_from(item or {}) for item in data.get("choices") or []],
            usage=dict(data.get("usage") or {}),
        )