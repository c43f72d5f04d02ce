"""Unit tests for the OneDrive client."""

import json

import httpx
import pytest

from glossary_manager.cloud_sync import OneDriveClient
from glossary_manager.exceptions import CloudSyncError
from glossary_manager.models.glossary import GlossaryDocument, TermEntry

CONTENT_URL = "https://graph.microsoft.com/v1.0/me/drive/root:/Glossar/glossar.json:/content"
CHILDREN_URL = "https://graph.microsoft.com/v1.0/me/drive/root/children"


class RecordingHandler:
    """MockTransport handler answering from a (method, url) -> response table."""

    def __init__(self, responses):
        self.responses = responses
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses[(request.method, str(request.url))]()


def make_client(handler, token="secret-token"):
    return OneDriveClient(access_token=token, transport=httpx.MockTransport(handler))


class TestOneDriveClient:
    """Test cases for the OneDriveClient class."""

    @pytest.fixture
    def stored_payload(self):
        return {
            "glossar": [
                {"begriff": "Algorithmus", "definition": "Anleitung", "beispiel": "", "quellen": ["A"]}
            ],
            "quellen": [{"quelle": "A", "beschreibung": "Buch"}],
        }

    def test_content_url(self):
        assert OneDriveClient("t").content_url == CONTENT_URL

    def test_load_existing(self, stored_payload):
        """Test loading an existing cloud file."""
        handler = RecordingHandler({
            ("GET", CONTENT_URL): lambda: httpx.Response(200, json=stored_payload),
        })
        document = make_client(handler).load_or_init()

        assert document.entries[0].term == "Algorithmus"
        assert document.entries[0].sources == ["A"]
        assert document.sources[0].label == "A"
        assert handler.requests[0].headers["Authorization"] == "Bearer secret-token"

    def test_load_tolerates_null_lists(self):
        handler = RecordingHandler({
            ("GET", CONTENT_URL): lambda: httpx.Response(200, json={"glossar": None}),
        })
        document = make_client(handler).load_or_init()
        assert document.entries == []
        assert document.sources == []

    def test_missing_file_is_initialized(self):
        """Test folder creation and empty file upload on 404."""
        handler = RecordingHandler({
            ("GET", CONTENT_URL): lambda: httpx.Response(404),
            ("POST", CHILDREN_URL): lambda: httpx.Response(201, json={}),
            ("PUT", CONTENT_URL): lambda: httpx.Response(201, json={}),
        })
        document = make_client(handler).load_or_init()

        assert document == GlossaryDocument()
        assert [r.method for r in handler.requests] == ["GET", "POST", "PUT"]

        folder = json.loads(handler.requests[1].content)
        assert folder["name"] == "Glossar"
        assert folder["@microsoft.graph.conflictBehavior"] == "replace"
        assert json.loads(handler.requests[2].content) == {"glossar": [], "quellen": []}

    def test_initialization_failure(self):
        handler = RecordingHandler({
            ("GET", CONTENT_URL): lambda: httpx.Response(404),
            ("POST", CHILDREN_URL): lambda: httpx.Response(409),
            ("PUT", CONTENT_URL): lambda: httpx.Response(500),
        })
        with pytest.raises(CloudSyncError) as exc_info:
            make_client(handler).load_or_init()
        assert exc_info.value.status_code == 500

    def test_other_errors_do_not_overwrite(self):
        """Test that an auth failure never replaces the cloud file."""
        handler = RecordingHandler({
            ("GET", CONTENT_URL): lambda: httpx.Response(401),
        })
        with pytest.raises(CloudSyncError) as exc_info:
            make_client(handler).load_or_init()

        assert exc_info.value.status_code == 401
        assert [r.method for r in handler.requests] == ["GET"]

    def test_invalid_content(self):
        handler = RecordingHandler({
            ("GET", CONTENT_URL): lambda: httpx.Response(200, content=b"not json"),
        })
        with pytest.raises(CloudSyncError):
            make_client(handler).load_or_init()

    def test_save_all(self):
        """Test uploading the whole document."""
        handler = RecordingHandler({
            ("PUT", CONTENT_URL): lambda: httpx.Response(200, json={}),
        })
        document = GlossaryDocument(entries=[TermEntry(term="Café", example="Espresso")])
        make_client(handler).save_all(document)

        body = json.loads(handler.requests[0].content)
        assert body["glossar"][0] == {
            "begriff": "Café", "definition": "", "beispiel": "Espresso", "quellen": []
        }

    def test_save_failure(self):
        handler = RecordingHandler({
            ("PUT", CONTENT_URL): lambda: httpx.Response(503),
        })
        with pytest.raises(CloudSyncError) as exc_info:
            make_client(handler).save_all(GlossaryDocument())
        assert exc_info.value.status_code == 503

    def test_transport_error(self):
        def failing(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(CloudSyncError):
            make_client(failing).save_all(GlossaryDocument())

    def test_missing_token(self):
        """Test that no request is made without a token."""
        handler = RecordingHandler({})
        with pytest.raises(CloudSyncError):
            make_client(handler, token=None).load_or_init()
        assert handler.requests == []
