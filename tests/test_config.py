import pytest

from core.config import DEFAULT_API_VERSION, DEFAULT_SERVER_NAME, Settings, load_settings
from core.errors import ConfigurationError


def test_defaults_from_empty_environment() -> None:
    settings = load_settings({})

    assert settings.endpoint is None
    assert settings.model is None
    assert settings.api_version == DEFAULT_API_VERSION
    assert settings.completion_timeout == 60.0
    assert settings.server_name == DEFAULT_SERVER_NAME
    assert settings.transport == "stdio"
    assert settings.log_level == "INFO"
    assert not settings.translation_configured


def test_reads_every_variable() -> None:
    settings = load_settings(
        {
            "AZURE_OPENAI_ENDPOINT": "https://example.openai.azure.com",
            "AZURE_OPENAI_MODEL": "gpt-4o-mini",
            "AZURE_OPENAI_API_VERSION": "2025-01-01-preview",
            "AZURE_OPENAI_API_KEY": "secret",
            "AZURE_TENANT_ID": "tenant",
            "COMPLETION_TIMEOUT_SECONDS": "15",
            "MCP_SERVER_NAME": "my-tools",
            "MCP_TRANSPORT": "HTTP",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings == Settings(
        endpoint="https://example.openai.azure.com",
        model="gpt-4o-mini",
        api_version="2025-01-01-preview",
        api_key="secret",
        tenant_id="tenant",
        completion_timeout=15.0,
        server_name="my-tools",
        transport="http",
        log_level="DEBUG",
    )
    assert settings.translation_configured


def test_blank_values_count_as_missing() -> None:
    settings = load_settings({"AZURE_OPENAI_ENDPOINT": "  ", "AZURE_OPENAI_MODEL": ""})
    assert settings.endpoint is None
    assert settings.model is None


def test_non_positive_timeout_disables_deadline() -> None:
    assert load_settings({"COMPLETION_TIMEOUT_SECONDS": "0"}).completion_timeout is None


def test_invalid_timeout() -> None:
    with pytest.raises(ConfigurationError, match="COMPLETION_TIMEOUT_SECONDS"):
        load_settings({"COMPLETION_TIMEOUT_SECONDS": "soon"})


def test_invalid_transport() -> None:
    with pytest.raises(ConfigurationError, match="MCP_TRANSPORT"):
        load_settings({"MCP_TRANSPORT": "carrier-pigeon"})


def test_require_translation_names_missing_variables() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        Settings(model="gpt-4o-mini").require_translation()

    message = str(excinfo.value)
    assert "AZURE_OPENAI_ENDPOINT" in message
    assert "AZURE_TENANT_ID" in message
    assert "AZURE_OPENAI_MODEL" not in message


def test_require_translation_accepts_tenant_or_key() -> None:
    Settings(endpoint="https://e", model="m", tenant_id="t").require_translation()
    Settings(endpoint="https://e", model="m", api_key="k").require_translation()
