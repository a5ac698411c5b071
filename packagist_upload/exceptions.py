"""
Custom exceptions for the Private Packagist upload client.
"""


class PackagistUploadError(Exception):
    """Base exception for upload client errors."""
    pass


class ConfigurationError(PackagistUploadError):
    """Raised when credentials or client configuration are invalid."""
    pass


class InputError(PackagistUploadError):
    """Raised when the package name, file path or artifact file is unusable."""
    pass


class HTTPError(PackagistUploadError):
    """Raised when an HTTP request fails before a response is received."""
    pass


class RegistryResponseError(PackagistUploadError):
    """
    Raised when a registry call fails.

    ``status_code`` is None when no response was received.
    """

    def __init__(self, status_code, response_text):
        self.status_code = status_code
        self.response_text = response_text
        if status_code is None:
            super().__init__(response_text)
        else:
            super().__init__(f"HTTP {status_code}: {response_text}")


class UploadError(RegistryResponseError):
    """Raised when the artifact upload is rejected."""
    pass


class AuthenticationError(UploadError):
    """Raised on 401/403, usually a signature or credential mismatch."""
    pass


class NotFoundError(UploadError):
    """Raised on 404, usually a package that does not exist yet."""
    pass


class VerificationError(RegistryResponseError):
    """Raised when fetching package information after an upload fails."""
    pass
