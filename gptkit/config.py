"""Client configuration for the supported API providers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

OPENAI_API_URL_V1 = "https://api.openai.com/v1"
ANTHROPIC_API_URL_V1 = "https://api.anthropic.com/v1"
DEFAULT_EMPTY_MESSAGES_LIMIT = 300

AZURE_API_PREFIX = "openai"
AZURE_DEPLOYMENTS_PREFIX = "deployments"
AZURE_CREDENTIAL_HEADER = "api-key"
AZURE_API_VERSION = "2023-05-15"

ANTHROPIC_API_VERSION = "2023-06-01"

DEFAULT_ASSISTANT_VERSION = "v2"

_AZURE_STRIP = re.compile(r"[.:]")


class APIType(str, Enum):
    OPENAI = "OPEN_AI"
    AZURE = "AZURE"
    AZURE_AD = "AZURE_AD"
    CLOUDFLARE_AZURE = "CLOUDFLARE_AZURE"
    ANTHROPIC = "ANTHROPIC"


@dataclass(repr=False)
class ClientConfig:
    """Settings a client needs to talk to an API endpoint."""

    auth_token: str = ""
    base_url: str = OPENAI_API_URL_V1
    org_id: str = ""
    api_type: APIType = APIType.OPENAI
    api_version: str = ""
    assistant_version: str = ""
    azure_model_mapper: Optional[Callable[[str], str]] = None
    http_client: Any = None
    empty_messages_limit: int = field(default=DEFAULT_EMPTY_MESSAGES_LIMIT)

    def __repr__(self) -> str:
        return "<OpenAI API ClientConfig>"

    __str__ = __repr__

    def azure_deployment_for(self, model: str) -> str:
        """Map a model name to an Azure deployment name."""
        if self.azure_model_mapper is not None:
            return self.azure_model_mapper(model)
        return model


def _azure_default_mapper(model: str) -> str:
    return _AZURE_STRIP.sub("", model)


def default_config(auth_token: str) -> ClientConfig:
    return ClientConfig(
        auth_token=auth_token,
        base_url=OPENAI_API_URL_V1,
        api_type=APIType.OPENAI,
        assistant_version=DEFAULT_ASSISTANT_VERSION,
        org_id="",
        empty_messages_limit=DEFAULT_EMPTY_MESSAGES_LIMIT,
    )


def default_azure_config(api_key: str, base_url: str) -> ClientConfig:
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url,
        org_id="",
        api_type=APIType.AZURE,
        api_version=AZURE_API_VERSION,
        azure_model_mapper=_azure_default_mapper,
        empty_messages_limit=DEFAULT_EMPTY_MESSAGES_LIMIT,
    )


def default_anthropic_config(api_key: str, base_url: str = "") -> ClientConfig:
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url or ANTHROPIC_API_URL_V1,
        org_id="",
        api_type=APIType.ANTHROPIC,
        api_version=ANTHROPIC_API_VERSION,
        empty_messages_limit=DEFAULT_EMPTY_MESSAGES_LIMIT,
    )