"""
Request signing compatible with the Private Packagist API.

The server recomputes every signature on its side, so the canonical form
built here (parameter order, separators and percent-encoding) has to match
it byte for byte.
"""

import base64
import hashlib
import hmac
import secrets
import time
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote_from_bytes, urlsplit

from .constants import AUTH_SCHEME, DEFAULT_CONFIG, DEFAULT_PORTS


@dataclass(frozen=True)
class Credentials:
    """API key and secret of a Private Packagist team token."""
    key: str
    secret: Union[bytes, str] = field(repr=False)


def body_to_string(body: Optional[bytes]) -> str:
    """
    Map a request body onto one character per byte.

    Latin-1 maps byte N to code point N, so arbitrary binary content
    survives unchanged and keeps its length.
    """
    if not body:
        return ''
    if isinstance(body, str):
        return body
    return bytes(body).decode('latin-1')


def rfc3986_encode(value: str) -> str:
    """
    Percent-encode everything except RFC 3986 unreserved characters.

    Args:
        value: String whose code points are all in the range 0-255

    Returns:
        Encoded string using uppercase ``%XX`` escapes

    Raises:
        ValueError: If a code point is above 255
    """
    try:
        raw = value.encode('latin-1')
    except UnicodeEncodeError as e:
        raise ValueError(f"cannot encode code point above 255: {e}") from e
    # quote_from_bytes always keeps A-Z a-z 0-9 and "_.-~"
    return quote_from_bytes(raw, safe='')


def build_query_string(params: Mapping[str, str]) -> str:
    """Build the sorted, encoded ``name=value&...`` segment."""
    return '&'.join(
        f"{rfc3986_encode(name)}={rfc3986_encode(params[name])}"
        for name in sorted(params)
    )


def build_base_string(method: str, host: str, path: str, params: Mapping[str, str]) -> str:
    """
    Build the string that gets signed.

    Format: METHOD + "\\n" + HOST + "\\n" + PATH + "\\n" + QUERY
    """
    return '\n'.join([method, host, path, build_query_string(params)])


def sign(base_string: str, secret: Union[bytes, str]) -> str:
    """
    Compute the base64 HMAC-SHA256 signature of a base string.

    Args:
        base_string: Output of build_base_string()
        secret: API secret

    Returns:
        Base64 encoded digest (standard alphabet, padded)
    """
    if isinstance(secret, str):
        secret = secret.encode('utf-8')

    mac = hmac.new(secret, base_string.encode('utf-8'), hashlib.sha256)
    return base64.b64encode(mac.digest()).decode('ascii')


def split_url(url: str) -> Tuple[str, str]:
    """Return the (host, path) pair a signature covers for ``url``."""
    parts = urlsplit(url)
    host = parts.hostname or ''
    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    return host, parts.path or '/'


class RequestSigner:
    """
    Produces ``Authorization`` header values for API requests.

    Holds nothing but the credentials; every call draws a fresh timestamp
    and cnonce, so a signer can be shared freely.
    """

    def __init__(self, credentials: Credentials, nonce_bytes: int = DEFAULT_CONFIG['nonce_bytes']):
        self.credentials = credentials
        self.nonce_bytes = nonce_bytes

    def signature_params(self, timestamp: int, cnonce: str, body: Optional[bytes] = None) -> Dict[str, str]:
        """Build the parameters covered by the signature."""
        params = {
            'key': self.credentials.key,
            'timestamp': str(timestamp),
            'cnonce': cnonce,
        }
        # an empty body is signed the same way as no body
        if body:
            params['body'] = body_to_string(body)
        return params

    def authorization_header(self, method: str, url: str, body: Optional[bytes] = None) -> str:
        """
        Generate the authorization header for one request.

        Args:
            method: HTTP method
            url: Absolute request URL
            body: Raw request body, if any

        Returns:
            Header value in the PACKAGIST-HMAC-SHA256 format
        """
        timestamp = int(time.time())
        cnonce = secrets.token_hex(self.nonce_bytes)

        host, path = split_url(url)
        params = self.signature_params(timestamp, cnonce, body)
        signature = sign(build_base_string(method, host, path, params), self.credentials.secret)

        return (
            f"{AUTH_SCHEME} Key={self.credentials.key}, Timestamp={timestamp}, "
            f"Cnonce={cnonce}, Signature={signature}"
        )
