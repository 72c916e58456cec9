import pytest
from fastapi.testclient import TestClient
from requests.structures import CaseInsensitiveDict

from webhooks_dashboard.app import create_app
from webhooks_dashboard.config import Settings
from webhooks_dashboard.upstream import UpstreamResponse

TEST_TOKEN = "shpat_test_token_123"
TEST_STORE = "test-store.myshopify.com"


class StubUpstream:
    """Records every upstream request and answers with a canned response or error"""

    def __init__(self):
        self.calls = []
        self.response = UpstreamResponse(
            status_code=200,
            body=b'{"webhooks":[]}',
            headers=CaseInsensitiveDict({"Content-Type": "application/json; charset=utf-8"}),
        )
        self.error = None

    def respond(self, status_code=200, body=b"", headers=None):
        self.response = UpstreamResponse(
            status_code=status_code,
            body=body,
            headers=CaseInsensitiveDict(headers or {}),
        )

    def send(self, request):
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings(store=TEST_STORE, access_token=TEST_TOKEN)


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def client(settings, upstream):
    app = create_app(settings, client=upstream)
    with TestClient(app) as c:
        yield c
