"""
Google OAuth - authorization-code flow for a single process-wide identity

The backend owns the token set: the callback exchanges the code, the
credential store keeps the resulting Credentials, and the gate hands them to
every Calendar API call until the next successful exchange replaces them.
"""
import json
import logging
import os
from typing import Any, Callable, Dict, List, Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from gcal_bridge.config import Settings
from gcal_bridge.core.errors import (
    CallerInputError,
    ConfigurationError,
    ProviderError,
    UnauthenticatedError,
)
from gcal_bridge.core.logging import log_operation_error
from gcal_bridge.schemas.google import GoogleAuthStatus

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"

FlowFactory = Callable[[Dict[str, Any], List[str], str], Flow]


def default_flow_factory(
    client_config: Dict[str, Any],
    scopes: List[str],
    redirect_uri: str,
) -> Flow:
    """Build an oauthlib Flow for the web client"""
    flow = Flow.from_client_config(client_config, scopes=scopes, redirect_uri=redirect_uri)
    # Consent URL and code exchange use different Flow objects; no PKCE verifier survives between them.
    flow.autogenerate_code_verifier = False
    return flow


def load_client_config(settings: Settings) -> Optional[Dict[str, Any]]:
    """Get Google OAuth client configuration"""
    # Try environment variables first
    if settings.google_client_id and settings.google_client_secret:
        return {
            "web": {
                "client_id": settings.google_client_id,
                "client_secret": settings.google_client_secret,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
                "redirect_uris": [settings.google_redirect_uri],
            }
        }

    # Then a downloaded client_secret.json
    if os.path.exists(settings.google_client_secrets_file):
        with open(settings.google_client_secrets_file) as f:
            return json.load(f)

    return None


class CredentialStore:
    """
    Holds at most one token set for the lifetime of the process.

    Reads and writes are plain reference swaps with no locking: the last
    successful exchange wins and in-flight requests may still use the previous
    credentials. Only suitable for a single operator logging in at a time.
    """

    def __init__(self):
        self._credentials: Optional[Credentials] = None

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._credentials

    def replace(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def is_empty(self) -> bool:
        return self._credentials is None


class AuthorizationFlow:
    """Builds the consent URL and exchanges authorization codes for tokens"""

    def __init__(
        self,
        settings: Settings,
        store: CredentialStore,
        flow_factory: Optional[FlowFactory] = None,
    ):
        self._settings = settings
        self._store = store
        self._flow_factory = flow_factory or default_flow_factory

    @property
    def scopes(self) -> List[str]:
        return list(self._settings.google_scopes)

    def _new_flow(self, operation: str) -> Flow:
        client_config = load_client_config(self._settings)
        if not client_config:
            raise ConfigurationError(operation=operation)
        return self._flow_factory(client_config, self.scopes, self._settings.google_redirect_uri)

    def authorization_url(self) -> str:
        """Consent screen URL requesting offline (refresh-capable) access"""
        flow = self._new_flow("begin_authorization")
        url, _ = flow.authorization_url(
            access_type="offline",
            include_granted_scopes="true",
            prompt="consent",
        )
        logger.info("🔗 Redirecting to Google consent screen")
        logger.debug("Consent URL: %s", url)
        return url

    def exchange_code(self, code: Optional[str]) -> Credentials:
        """
        Exchange an authorization code for tokens and install them.

        The store is only written after a successful exchange; any failure
        leaves the previous token set in place.
        """
        if not code:
            raise CallerInputError("Authorization code not found.", operation="complete_authorization")

        flow = self._new_flow("complete_authorization")
        try:
            flow.fetch_token(code=code)
            credentials = flow.credentials
        except Exception as e:
            error = ProviderError("Error retrieving access token.", operation="complete_authorization")
            log_operation_error(logger, "complete_authorization", error, cause=e)
            raise error from e

        self._store.replace(credentials)
        logger.info(
            "✅ Tokens acquired (expiry=%s, refresh_token=%s)",
            credentials.expiry.isoformat() if credentials.expiry else None,
            "yes" if credentials.refresh_token else "no",
        )
        return credentials

    def status(self) -> GoogleAuthStatus:
        credentials = self._store.credentials
        if credentials is None:
            return GoogleAuthStatus(authenticated=False)
        return GoogleAuthStatus(
            authenticated=True,
            expiry=credentials.expiry.isoformat() if credentials.expiry else None,
            has_refresh_token=bool(credentials.refresh_token),
            scopes=list(credentials.scopes) if credentials.scopes else [],
        )


class AuthenticationGate:
    """
    Precondition for every protected operation.

    Never touches the network and never checks expiry: an expired access token
    is refreshed by google-auth when the Calendar client uses it.
    """

    def __init__(self, store: CredentialStore):
        self._store = store

    def require(self, operation: str) -> Credentials:
        credentials = self._store.credentials
        if credentials is None:
            raise UnauthenticatedError(operation=operation)
        return credentials
