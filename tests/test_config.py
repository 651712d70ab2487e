import pytest

from gptkit.config import (
    ANTHROPIC_API_VERSION,
    APIType,
    default_anthropic_config,
    default_azure_config,
    default_config,
)


def _custom_mapper(model):
    return {"gpt-3.5-turbo": "my-gpt35"}.get(model, model)


@pytest.mark.parametrize(
    "model, mapper, expected",
    [
        ("gpt-3.5-turbo", None, "gpt-35-turbo"),
        ("gpt-3.5-turbo-0301", None, "gpt-35-turbo-0301"),
        ("text-embedding-ada-002", None, "text-embedding-ada-002"),
        ("", None, ""),
        ("models", None, "models"),
        ("gpt-3.5-turbo", _custom_mapper, "my-gpt35"),
    ],
)
def test_azure_deployment_for(model, mapper, expected):
    config = default_azure_config("", "https://test.openai.azure.com/")
    if mapper is not None:
        config.azure_model_mapper = mapper
    assert config.azure_deployment_for(model) == expected


def test_azure_mapper_strips_colons():
    config = default_azure_config("", "https://test.openai.azure.com/")
    assert config.azure_deployment_for("ft:gpt.4") == "ftgpt4"


def test_without_mapper_model_is_unchanged():
    config = default_config("token")
    assert config.azure_deployment_for("gpt-3.5-turbo") == "gpt-3.5-turbo"


def test_default_anthropic_config():
    base_url = "https://api.anthropic.com/v1"
    config = default_anthropic_config("placeholder", base_url)
    assert config.api_type is APIType.ANTHROPIC
    assert config.api_version == ANTHROPIC_API_VERSION == "2023-06-01"
    assert config.base_url == base_url
    assert config.empty_messages_limit == 300


def test_default_anthropic_config_with_empty_values():
    config = default_anthropic_config("", "")
    assert config.api_type is APIType.ANTHROPIC
    assert config.api_version == ANTHROPIC_API_VERSION
    assert config.base_url == "https://api.anthropic.com/v1"


def test_default_config_values():
    config = default_config("token")
    assert config.auth_token == "token"
    assert config.base_url == "https://api.openai.com/v1"
    assert config.api_type is APIType.OPENAI
    assert config.assistant_version == "v2"
    assert config.org_id == ""
    assert config.empty_messages_limit == 300


def test_default_azure_config_values():
    config = default_azure_config("placeholder", "https://test.openai.azure.com/")
    assert config.api_type is APIType.AZURE
    assert config.api_version == "2023-05-15"
    assert config.base_url == "https://test.openai.azure.com/"


def test_string_form_hides_token():
    config = default_config("secret")
    assert str(config) == "<OpenAI API ClientConfig>"
    assert "secret" not in repr(config)


def test_api_type_values():
    assert APIType("AZURE_AD") is APIType.AZURE_AD
    assert APIType.CLOUDFLARE_AZURE.value == "CLOUDFLARE_AZURE"