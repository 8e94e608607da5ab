"""
Pytest configuration and fixtures for testing.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import Settings, get_settings
from app.core.notifications import CrmWebhookClient, ResendMailer, get_crm_client, get_auto_reply_mailer

CRM_URL = "https://crm.example.com/hooks/contact"
RESEND_URL = "https://api.resend.com/emails"


class OutboundRecorder:
    """Fake outbound network: records every request and answers per host"""

    def __init__(self):
        self.requests = []
        self.outcomes = {}  # host -> status code, or "unreachable"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.get(request.url.host, 200)
        if outcome == "unreachable":
            raise httpx.ConnectError("Connection refused", request=request)
        return httpx.Response(outcome, json={"id": "re_123"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def to_host(self, host: str):
        return [r for r in self.requests if r.url.host == host]


def make_settings(**overrides) -> Settings:
    values = {"crm_webhook_url": None, "resend_api_key": None, "resend_from": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def outbound():
    """Return a recorder standing in for the CRM webhook and Resend."""
    return OutboundRecorder()


@pytest.fixture
def configure(outbound):
    """Configure the app's integrations; clients send through the recorder."""

    def _configure(crm: bool = False, email: bool = False) -> Settings:
        settings = make_settings(
            crm_webhook_url=CRM_URL if crm else None,
            resend_api_key="re_test_key" if email else None,
            resend_from="LumiMaid <hello@lumimaid.com>" if email else None,
        )

        def crm_client():
            if not settings.crm_webhook_url:
                return None
            return CrmWebhookClient(settings.crm_webhook_url, transport=outbound.transport)

        def mailer():
            if not settings.auto_reply_enabled:
                return None
            return ResendMailer(settings.resend_api_key, settings.resend_from, transport=outbound.transport)

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_crm_client] = crm_client
        app.dependency_overrides[get_auto_reply_mailer] = mailer
        return settings

    _configure()
    yield _configure
    app.dependency_overrides.clear()


@pytest.fixture
def client(configure):
    """Create a test client for the FastAPI application."""
    return TestClient(app)


@pytest.fixture
def valid_submission():
    """Return a minimal valid contact submission."""
    return {"name": "Jane Doe", "email": "jane@example.com", "message": "Need a quote"}
