"""OneDrive sync of the glossary document through the Microsoft Graph API."""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from .exceptions import CloudSyncError
from .models.glossary import GlossaryDocument

logger = structlog.get_logger(__name__)

GRAPH_BASE = "https://graph.microsoft.com/v1.0"
FILE_PATH = "/me/drive/root:/Glossar/glossar.json"
FOLDER_NAME = "Glossar"


class OneDriveClient:
    """Loads and saves the whole glossary as one JSON file on the user's drive."""

    def __init__(
        self,
        access_token: Optional[str],
        base_url: str = GRAPH_BASE,
        file_path: str = FILE_PATH,
        folder_name: str = FOLDER_NAME,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ) -> None:
        """
        Initialize the client.

        Args:
            access_token: Graph bearer token with Files.ReadWrite scope
            base_url: Graph API root
            file_path: Drive path of the glossary file
            folder_name: Folder created under the drive root on first use
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.file_path = file_path
        self.folder_name = folder_name
        self.timeout = httpx.Timeout(timeout)
        self.transport = transport

    @property
    def content_url(self) -> str:
        return f"{self.base_url}{self.file_path}:/content"

    def _client(self) -> httpx.Client:
        if not self.access_token:
            raise CloudSyncError("No Microsoft Graph access token configured")

        return httpx.Client(
            headers={"Authorization": f"Bearer {self.access_token}"},
            timeout=self.timeout,
            transport=self.transport
        )

    def _put_document(self, client: httpx.Client, document: GlossaryDocument) -> httpx.Response:
        return client.put(self.content_url, json=document.to_payload())

    def load_or_init(self) -> GlossaryDocument:
        """
        Download the glossary, creating an empty one if the file is missing.

        Raises:
            CloudSyncError: If the download fails for another reason, the
                content is not a glossary document, or initialization fails
        """
        try:
            with self._client() as client:
                response = client.get(self.content_url)

                if response.status_code == 200:
                    try:
                        document = GlossaryDocument.model_validate(response.json())
                    except (ValueError, ValidationError) as e:
                        raise CloudSyncError(f"Cloud glossary file is invalid: {e}") from e
                    logger.info(
                        "Glossary loaded from OneDrive",
                        total_entries=len(document.entries),
                        total_sources=len(document.sources)
                    )
                    return document

                if response.status_code != 404:
                    raise CloudSyncError(
                        f"Loading failed with status {response.status_code}",
                        status_code=response.status_code
                    )

                logger.info("Glossary file missing on OneDrive, creating it", path=self.file_path)
                self._ensure_folder(client)

                empty = GlossaryDocument()
                put_response = self._put_document(client, empty)
                if not put_response.is_success:
                    raise CloudSyncError(
                        "Could not create the glossary file",
                        status_code=put_response.status_code
                    )
                return empty

        except httpx.HTTPError as e:
            raise CloudSyncError(f"OneDrive request failed: {e}") from e

    def _ensure_folder(self, client: httpx.Client) -> None:
        """Create the glossary folder, replacing an existing one is accepted by Graph."""
        response = client.post(
            f"{self.base_url}/me/drive/root/children",
            json={
                "name": self.folder_name,
                "folder": {},
                "@microsoft.graph.conflictBehavior": "replace",
            }
        )
        if not response.is_success:
            logger.warning(
                "Folder creation returned an error",
                folder=self.folder_name,
                status_code=response.status_code
            )

    def save_all(self, document: GlossaryDocument) -> None:
        """
        Upload the whole glossary, overwriting the cloud copy.

        Raises:
            CloudSyncError: If the upload fails
        """
        try:
            with self._client() as client:
                response = self._put_document(client, document)
        except httpx.HTTPError as e:
            raise CloudSyncError(f"OneDrive request failed: {e}") from e

        if not response.is_success:
            raise CloudSyncError("Saving failed", status_code=response.status_code)

        logger.info(
            "Glossary saved to OneDrive",
            total_entries=len(document.entries),
            total_sources=len(document.sources)
        )
