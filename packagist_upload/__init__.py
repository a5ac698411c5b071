"""
Private Packagist upload client

A Python client that uploads artifacts to Private Packagist, signing each
request with the PACKAGIST-HMAC-SHA256 scheme the API verifies.

Example usage:
    from packagist_upload import PackagistClient

    with PackagistClient("api-key", "api-secret") as client:
        client.upload_artifact("acme/package", data, "application/zip", "package.zip")
"""

__version__ = "1.0.0"

from .client import PackagistClient
from .exceptions import (
    PackagistUploadError,
    ConfigurationError,
    InputError,
    HTTPError,
    RegistryResponseError,
    UploadError,
    AuthenticationError,
    NotFoundError,
    VerificationError
)
from .signing import (
    Credentials,
    RequestSigner,
    rfc3986_encode,
    build_base_string,
    sign
)
from .uploader import UploadResult, upload_package
from .constants import (
    AUTH_SCHEME,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    USER_AGENT
)

__all__ = [
    "PackagistClient",
    "PackagistUploadError",
    "ConfigurationError",
    "InputError",
    "HTTPError",
    "RegistryResponseError",
    "UploadError",
    "AuthenticationError",
    "NotFoundError",
    "VerificationError",
    "Credentials",
    "RequestSigner",
    "rfc3986_encode",
    "build_base_string",
    "sign",
    "UploadResult",
    "upload_package",
    "AUTH_SCHEME",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "USER_AGENT"
]
