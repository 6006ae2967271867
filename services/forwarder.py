"""
Forwarding of built request bodies to the OpenAI API.
"""
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from config import Config
from utils.errors import ConfigurationError, RemoteAPIError, TransportError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger, register_secret


class Endpoint(Enum):
    """The two fixed OpenAI endpoints the bridge talks to."""
    CHAT_COMPLETIONS = "chat_completions"
    RESPONSES = "responses"


class RequestForwarder:
    """Sends one authenticated POST per call and classifies failures."""

    def __init__(
        self,
        api_key: str,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize the forwarder.

        Args:
            api_key: OpenAI bearer credential
            client: httpx client to use; defaults to the shared pooled client
            base_url: API root; defaults to Config.OPENAI_BASE_URL
        """
        self._api_key = api_key
        self._client = client
        self.base_url = (base_url or Config.OPENAI_BASE_URL).rstrip("/")
        register_secret(api_key)

    def __repr__(self) -> str:
        return f"RequestForwarder(base_url={self.base_url!r})"

    def url_for(self, endpoint: Endpoint) -> str:
        """Absolute URL of an endpoint."""
        if endpoint is Endpoint.CHAT_COMPLETIONS:
            return self.base_url + Config.CHAT_COMPLETIONS_PATH
        return self.base_url + Config.RESPONSES_PATH

    async def forward(self, endpoint: Endpoint, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a request body to an OpenAI endpoint.

        Args:
            endpoint: Target endpoint
            body: JSON-serializable request body

        Returns:
            Parsed JSON object from a 2xx response

        Raises:
            ConfigurationError: if no API key is configured
            TransportError: if no response was received
            RemoteAPIError: on a non-2xx status or a non-object JSON body
        """
        if not self._api_key:
            raise ConfigurationError(
                "OPENAI_API_KEY is not configured. Set it in the environment or a .env file."
            )

        url = self.url_for(endpoint)
        client = self._client or HTTPClientManager.get_openai_client()

        app_logger.info(f"Forwarding {endpoint.value} request for model {body.get('model')}")
        try:
            response = await client.post(
                url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self._api_key}",
                },
                json=body,
            )
        except httpx.RequestError as e:
            app_logger.error(f"Transport failure calling {url}: {type(e).__name__}")
            raise TransportError(e, url) from e

        if not response.is_success:
            app_logger.warning(f"OpenAI API returned status {response.status_code} for {endpoint.value}")
            raise RemoteAPIError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            app_logger.error(f"OpenAI API returned a non-JSON body for {endpoint.value}")
            raise RemoteAPIError(response.status_code, response.text) from None

        if not isinstance(data, dict):
            raise RemoteAPIError(response.status_code, response.text)

        app_logger.info(f"OpenAI API call to {endpoint.value} completed with status {response.status_code}")
        return data
