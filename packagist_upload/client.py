"""
Private Packagist API client.

This module performs the signed requests needed to publish an artifact:
the artifact upload itself and the package lookup used to verify it.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    HEADER_AUTHORIZATION,
    HEADER_FILENAME,
    USER_AGENT
)
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    HTTPError,
    NotFoundError,
    UploadError,
    VerificationError
)
from .signing import Credentials, RequestSigner

logger = logging.getLogger(__name__)


class PackagistClient:
    """
    Client for the artifact endpoints of the Private Packagist API.

    Credentials and base URL are fixed at construction. Each request is
    signed with its own timestamp and cnonce.
    """

    def __init__(self, api_key: str, api_secret: str, base_url: str = DEFAULT_BASE_URL, **config):
        """
        Initialize the client.

        Args:
            api_key: API token key
            api_secret: API token secret
            base_url: Registry URL, e.g. https://packagist.com
            **config: Configuration options (timeout, nonce_bytes)

        Raises:
            ConfigurationError: If credentials are missing or config is invalid
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip('/')
        self.api_url = f"{self.base_url}/api"

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self.signer = RequestSigner(Credentials(self.api_key, self.api_secret), self.config['nonce_bytes'])
        self.session = requests.Session()

    def _validate_config(self):
        """Validate credentials and client configuration."""
        if not self.api_key or not self.api_secret:
            raise ConfigurationError("API key and secret are required")

        # the key is signed as one character per byte
        try:
            self.api_key.encode('latin-1')
        except UnicodeEncodeError as e:
            raise ConfigurationError(f"API key contains unsupported characters: {e}") from e

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

        if self.config['nonce_bytes'] <= 0:
            raise ConfigurationError("nonce_bytes must be positive")

    def _headers(self, method: str, url: str, body: Optional[bytes] = None) -> Dict[str, str]:
        return {
            HEADER_AUTHORIZATION: self.signer.authorization_header(method, url, body),
            'Accept': CONTENT_TYPE_JSON,
            'User-Agent': USER_AGENT,
        }

    def _send(self, method: str, url: str, headers: Dict[str, str], body: Optional[bytes] = None) -> requests.Response:
        """
        Send a signed request.

        Raises:
            HTTPError: If no response was received (connection error, timeout)
        """
        try:
            return self.session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=self.config['timeout']
            )
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

    def package_url(self, package_name: str) -> str:
        """Fallback web URL of a package."""
        return f"{self.base_url}/packages/{package_name}"

    def upload_artifact(self, package_name: str, file_bytes: bytes, content_type: str, file_name: str) -> Any:
        """
        Upload an artifact to a package.

        Args:
            package_name: Package name, e.g. "acme/package"
            file_bytes: Raw artifact contents
            content_type: MIME type of the artifact
            file_name: File name reported to the registry

        Returns:
            Decoded JSON response

        Raises:
            AuthenticationError: On 401/403
            NotFoundError: On 404
            UploadError: On any other non-success status or a non-JSON body
            HTTPError: If the request could not be sent
        """
        url = f"{self.api_url}/packages/{package_name}/artifacts/"

        headers = self._headers('POST', url, file_bytes)
        headers.update({
            'Content-Type': content_type,
            HEADER_FILENAME: file_name,
        })

        logger.info("Uploading artifact %s (%d bytes, %s) to %s",
                    file_name, len(file_bytes), content_type, package_name)

        response = self._send('POST', url, headers, file_bytes)

        if not response.ok:
            if response.status_code in (401, 403):
                raise AuthenticationError(response.status_code, response.text)
            if response.status_code == 404:
                raise NotFoundError(response.status_code, response.text)
            raise UploadError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise UploadError(response.status_code, response.text) from e

    def get_package_info(self, package_name: str) -> Any:
        """
        Fetch package metadata.

        Args:
            package_name: Package name, e.g. "acme/package"

        Returns:
            Decoded JSON response

        Raises:
            VerificationError: If the request fails for any reason
        """
        url = f"{self.api_url}/packages/{package_name}/"

        headers = self._headers('GET', url)
        headers['Content-Type'] = CONTENT_TYPE_JSON

        try:
            response = self._send('GET', url, headers)
        except HTTPError as e:
            raise VerificationError(None, str(e)) from e

        if not response.ok:
            raise VerificationError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise VerificationError(response.status_code, response.text) from e

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
