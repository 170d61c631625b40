"""
Tests for the credential store, the OAuth authorization flow and the gate.
"""

import json
from urllib.parse import parse_qs, urlparse

import pytest
from google.oauth2.credentials import Credentials

from gcal_bridge.config import Settings
from gcal_bridge.core.errors import (
    CallerInputError,
    ConfigurationError,
    ProviderError,
    UnauthenticatedError,
)
from gcal_bridge.services.google.auth import (
    AuthenticationGate,
    AuthorizationFlow,
    CredentialStore,
    load_client_config,
)


class TestCredentialStore:
    def test_starts_empty(self):
        store = CredentialStore()

        assert store.is_empty()
        assert store.credentials is None

    def test_replace_overwrites_previous_token_set(self):
        store = CredentialStore()
        first = Credentials(token="first")
        second = Credentials(token="second")

        store.replace(first)
        store.replace(second)

        assert store.credentials is second
        assert not store.is_empty()


class TestClientConfig:
    def test_environment_credentials_build_web_config(self, settings):
        config = load_client_config(settings)

        assert config["web"]["client_id"] == "test-client-id"
        assert config["web"]["client_secret"] == "test-client-secret"
        assert config["web"]["redirect_uris"] == [settings.google_redirect_uri]

    def test_falls_back_to_client_secrets_file(self, tmp_path):
        secrets_file = tmp_path / "client_secret.json"
        file_config = {"web": {"client_id": "from-file", "client_secret": "file-secret"}}
        secrets_file.write_text(json.dumps(file_config))
        settings = Settings(_env_file=None, google_client_secrets_file=str(secrets_file))

        assert load_client_config(settings) == file_config

    def test_unconfigured_client_returns_none(self, tmp_path):
        settings = Settings(
            _env_file=None,
            google_client_secrets_file=str(tmp_path / "nope.json"),
        )

        assert load_client_config(settings) is None


class TestAuthorizationUrl:
    """Uses the real google_auth_oauthlib Flow; building the URL needs no network."""

    def _query(self, url):
        return parse_qs(urlparse(url).query)

    def test_url_carries_scopes_and_offline_access(self, settings):
        flow = AuthorizationFlow(settings, CredentialStore())

        query = self._query(flow.authorization_url())

        assert query["access_type"] == ["offline"]
        assert query["scope"][0].split(" ") == settings.google_scopes
        assert query["client_id"] == ["test-client-id"]
        assert query["redirect_uri"] == [settings.google_redirect_uri]
        assert query["response_type"] == ["code"]
        assert "code_challenge" not in query

    def test_url_does_not_depend_on_stored_tokens(self, settings):
        store = CredentialStore()
        flow = AuthorizationFlow(settings, store)
        before = self._query(flow.authorization_url())

        store.replace(Credentials(token="already-logged-in"))
        after = self._query(flow.authorization_url())

        assert after["scope"] == before["scope"]
        assert after["access_type"] == ["offline"]

    def test_unconfigured_client_raises_configuration_error(self, tmp_path):
        settings = Settings(
            _env_file=None,
            google_client_secrets_file=str(tmp_path / "nope.json"),
        )
        flow = AuthorizationFlow(settings, CredentialStore())

        with pytest.raises(ConfigurationError) as exc_info:
            flow.authorization_url()

        assert exc_info.value.status_code == 500


class TestCodeExchange:
    def test_missing_code_is_caller_error_without_provider_contact(self, settings, flow_factory):
        flow = AuthorizationFlow(settings, CredentialStore(), flow_factory=flow_factory)

        for code in (None, ""):
            with pytest.raises(CallerInputError) as exc_info:
                flow.exchange_code(code)
            assert exc_info.value.status_code == 400

        assert flow_factory.flows == []
        assert flow_factory.exchanged_codes == []

    def test_successful_exchange_installs_credentials(self, settings, flow_factory):
        store = CredentialStore()
        flow = AuthorizationFlow(settings, store, flow_factory=flow_factory)

        credentials = flow.exchange_code("abc")

        assert flow_factory.exchanged_codes == ["abc"]
        assert store.credentials is credentials
        assert credentials.token == "token-for-abc"

    def test_failed_exchange_leaves_store_untouched(self, settings, flow_factory):
        store = CredentialStore()
        flow = AuthorizationFlow(settings, store, flow_factory=flow_factory)
        flow.exchange_code("first")
        original = store.credentials

        flow_factory.error = ConnectionError("network down")
        with pytest.raises(ProviderError) as exc_info:
            flow.exchange_code("second")

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert store.credentials is original

    def test_status_reports_without_exposing_tokens(self, settings, flow_factory):
        store = CredentialStore()
        flow = AuthorizationFlow(settings, store, flow_factory=flow_factory)

        assert flow.status().authenticated is False

        flow.exchange_code("abc")
        status = flow.status()

        assert status.authenticated is True
        assert status.has_refresh_token is True
        assert status.expiry is not None
        assert "token-for-abc" not in status.model_dump_json()


class TestAuthenticationGate:
    def test_rejects_when_no_token_set(self):
        gate = AuthenticationGate(CredentialStore())

        with pytest.raises(UnauthenticatedError) as exc_info:
            gate.require("check_free_busy")

        assert exc_info.value.status_code == 401
        assert "/auth/google" in exc_info.value.message
        assert exc_info.value.operation == "check_free_busy"

    def test_returns_current_token_set(self):
        store = CredentialStore()
        gate = AuthenticationGate(store)
        credentials = Credentials(token="abc")
        store.replace(credentials)

        assert gate.require("create_event") is credentials
