# =============================================================================
# core/credentials.py  —  Credential providers for the completion service
# =============================================================================
#
# The completion client never acquires tokens itself.  It is handed a
# CredentialProvider at construction and asks it for a token whenever it
# sends a request.  Two providers exist:
#
#   StaticKeyCredential     an API key from configuration ("api-key" header)
#   AzureIdentityCredential a managed-identity / developer login via
#                           azure-identity ("Authorization: Bearer ...")
#
# The azure-identity credential object is created ONCE and reused.  It caches
# the short-lived access token and refreshes it shortly before expiry.
# =============================================================================

from abc import ABC, abstractmethod

from azure.identity import DefaultAzureCredential

from core.config import Settings
from core.errors import ConfigurationError

COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


class CredentialProvider(ABC):
    """Something that can hand out a valid credential for the next request."""

    # "bearer" tokens go in the Authorization header; "api_key" in api-key.
    scheme: str = "bearer"

    @abstractmethod
    def get_token(self) -> str:
        ...


class StaticKeyCredential(CredentialProvider):
    scheme = "api_key"

    def __init__(self, api_key: str):
        if not api_key:
            raise ConfigurationError("API key must not be empty")
        self._api_key = api_key

    def get_token(self) -> str:
        return self._api_key


class AzureIdentityCredential(CredentialProvider):
    """Bearer tokens from DefaultAzureCredential, pinned to one tenant."""

    scheme = "bearer"

    def __init__(self, tenant_id: str, scope: str = COGNITIVE_SERVICES_SCOPE):
        if not tenant_id:
            raise ConfigurationError("AZURE_TENANT_ID is required for identity auth")
        self.tenant_id = tenant_id
        self.scope = scope
        self._credential = DefaultAzureCredential(tenant_id=tenant_id)

    def get_token(self) -> str:
        return self._credential.get_token(self.scope).token


def credential_from_settings(settings: Settings) -> CredentialProvider:
    """Prefer an explicit API key; otherwise fall back to Azure identity."""
    if settings.api_key:
        return StaticKeyCredential(settings.api_key)
    if settings.tenant_id:
        return AzureIdentityCredential(settings.tenant_id)
    raise ConfigurationError(
        "No credential configured; set AZURE_OPENAI_API_KEY or AZURE_TENANT_ID"
    )
