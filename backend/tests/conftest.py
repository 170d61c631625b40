"""Shared fixtures: test settings, a fake OAuth flow and a fake Calendar client.

The fakes stand in for google_auth_oauthlib's Flow and the googleapiclient
Calendar Resource so no test talks to Google.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from google.oauth2.credentials import Credentials

from gcal_bridge.config import Settings
from gcal_bridge.main import create_app

REDIRECT_URI = "http://localhost:3000/auth/google/callback"


# ─────────────────────────────────────────────────────────────────────────────
# OAuth flow fake
# ─────────────────────────────────────────────────────────────────────────────


class FakeFlow:
    def __init__(self, factory, client_config, scopes, redirect_uri):
        self.factory = factory
        self.client_config = client_config
        self.scopes = scopes
        self.redirect_uri = redirect_uri
        self._credentials = None

    def authorization_url(self, **kwargs):
        self.factory.authorization_calls.append(kwargs)
        scope = "+".join(self.scopes)
        url = (
            "https://accounts.example.com/o/oauth2/auth"
            f"?client_id={self.client_config['web']['client_id']}"
            f"&scope={scope}&access_type={kwargs.get('access_type')}"
        )
        return url, "state-token"

    def fetch_token(self, code):
        self.factory.exchanged_codes.append(code)
        if self.factory.error is not None:
            raise self.factory.error
        self._credentials = Credentials(
            token=f"token-for-{code}",
            refresh_token=f"refresh-for-{code}",
            token_uri="https://oauth2.googleapis.com/token",
            client_id=self.client_config["web"]["client_id"],
            client_secret=self.client_config["web"]["client_secret"],
            scopes=self.scopes,
            expiry=datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=1),
        )

    @property
    def credentials(self):
        if self._credentials is None:
            raise ValueError("There is no access token for this session")
        return self._credentials


class FakeFlowFactory:
    """Callable with the flow_factory signature; records what each flow did."""

    def __init__(self):
        self.flows = []
        self.authorization_calls = []
        self.exchanged_codes = []
        self.error = None

    def __call__(self, client_config, scopes, redirect_uri):
        flow = FakeFlow(self, client_config, scopes, redirect_uri)
        self.flows.append(flow)
        return flow


# ─────────────────────────────────────────────────────────────────────────────
# Calendar client fake
# ─────────────────────────────────────────────────────────────────────────────


class FakeRequest:
    def __init__(self, result, error=None):
        self._result = result
        self._error = error

    def execute(self):
        if self._error is not None:
            raise self._error
        return self._result


class FakeFreeBusy:
    def __init__(self, service):
        self._service = service

    def query(self, body):
        self._service.freebusy_bodies.append(body)
        return FakeRequest(self._service.freebusy_response, self._service.error)


class FakeEvents:
    def __init__(self, service):
        self._service = service

    def insert(self, **kwargs):
        self._service.inserts.append(kwargs)
        created = dict(kwargs["body"])
        created["id"] = "evt-1"
        created["htmlLink"] = "https://www.google.com/calendar/event?eid=evt-1"
        return FakeRequest(created, self._service.error)


class FakeCalendarService:
    """Mimics service.freebusy().query(...).execute() and service.events().insert(...).execute()."""

    def __init__(self):
        self.freebusy_bodies = []
        self.inserts = []
        self.credentials_seen = []
        self.error = None
        self.freebusy_response = {
            "kind": "calendar#freeBusy",
            "calendars": {
                "a@example.com": {
                    "busy": [
                        {"start": "2024-09-10T17:00:00Z", "end": "2024-09-10T18:00:00Z"},
                    ]
                }
            },
        }

    def factory(self, credentials):
        self.credentials_seen.append(credentials)
        return self

    @property
    def provider_calls(self):
        return len(self.freebusy_bodies) + len(self.inserts)

    def freebusy(self):
        return FakeFreeBusy(self)

    def events(self):
        return FakeEvents(self)


# ─────────────────────────────────────────────────────────────────────────────
# Application fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        google_client_id="test-client-id",
        google_client_secret="test-client-secret",
        google_redirect_uri=REDIRECT_URI,
        google_client_secrets_file=str(tmp_path / "missing_client_secret.json"),
    )


@pytest.fixture
def flow_factory() -> FakeFlowFactory:
    return FakeFlowFactory()


@pytest.fixture
def calendar_service() -> FakeCalendarService:
    return FakeCalendarService()


@pytest.fixture
def app(settings, flow_factory, calendar_service):
    return create_app(
        settings,
        flow_factory=flow_factory,
        service_factory=calendar_service.factory,
    )


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def authenticated_client(client) -> TestClient:
    response = client.get("/auth/google/callback", params={"code": "valid-code"})
    assert response.status_code == 200
    return client
