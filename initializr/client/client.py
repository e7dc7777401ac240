import logging

import httpx
from pydantic import ValidationError

from initializr._compat import Self
from initializr.config.settings import get_service_url, get_timeout
from initializr.exceptions import MetadataFetchError, StarterDownloadError
from initializr.metadata.models import InitializrMetadata
from initializr.project.request import ProjectRequest

logger = logging.getLogger(__name__)

METADATA_ENDPOINT = "/metadata/client"
STARTER_ENDPOINT = "/starter.zip"
METADATA_MEDIA_TYPE = "application/vnd.initializr.v2.2+json"


class InitializrClient:
    """A client for a Spring Initializr-compatible project generation service."""

    def __init__(
        self,
        service_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.service_url = service_url or get_service_url()
        self.timeout = timeout or get_timeout()
        self.transport = transport
        self.client: httpx.AsyncClient | None = None

    def start_client(self) -> Self:
        """Initialize the HTTP client."""
        self.client = httpx.AsyncClient(base_url=self.service_url, timeout=self.timeout, transport=self.transport)
        return self

    async def close(self):
        """Close the HTTP client."""
        if self.client:
            await self.client.aclose()
            self.client = None

    def _get_client(self) -> httpx.AsyncClient:
        if not self.client:
            self.start_client()
            assert self.client is not None
        return self.client

    async def fetch_metadata(self) -> InitializrMetadata:
        """Fetch the client metadata describing the available project options.

        Returns:
            The parsed metadata.

        Raises:
            MetadataFetchError: If the request fails or the document is not valid metadata.
        """
        client = self._get_client()
        logger.debug("Fetching metadata from %s%s", self.service_url, METADATA_ENDPOINT)
        try:
            response = await client.get(METADATA_ENDPOINT, headers={"Accept": METADATA_MEDIA_TYPE})
            response.raise_for_status()
            return InitializrMetadata.model_validate(response.json())
        except httpx.HTTPError as exc:
            msg = f"Error fetching metadata from {self.service_url}: {exc}"
            raise MetadataFetchError(msg) from exc
        except (ValueError, ValidationError) as exc:
            msg = f"Invalid metadata document from {self.service_url}: {exc}"
            raise MetadataFetchError(msg) from exc

    async def download_starter(self, request: ProjectRequest) -> bytes:
        """Download the generated project archive.

        Args:
            request: The project settings and selected dependencies.

        Returns:
            The zip archive content.

        Raises:
            StarterDownloadError: If the request fails. The message carries the
                HTTP status and body when the service answered.
        """
        client = self._get_client()
        params = request.to_query_params()
        logger.debug("Downloading starter with params %s", params)
        try:
            response = await client.get(STARTER_ENDPOINT, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            msg = f"Error generating project (status {exc.response.status_code}): {exc.response.text}"
            raise StarterDownloadError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Error generating project: {exc}"
            raise StarterDownloadError(msg) from exc
        return response.content
