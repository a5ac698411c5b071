"""
Upload orchestration: read, upload, verify, resolve the package URL.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from .client import PackagistClient
from .config import read_artifact
from .constants import CONTENT_TYPE_ZIP
from .exceptions import VerificationError

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    """Outcome of one upload run."""
    success: bool
    package_name: str
    package_url: str = ''
    upload_result: Any = None
    package_info: Any = None
    error: Optional[str] = None
    verification_error: Optional[str] = None


def resolve_package_url(client: PackagistClient, package_name: str, package_info: Any) -> str:
    """Prefer the registry's web view link, fall back to the standard package URL."""
    if isinstance(package_info, dict):
        web_view = (package_info.get('links') or {}).get('webView')
        if web_view:
            return web_view
    return client.package_url(package_name)


def _log_package_info(package_info: Any):
    if not isinstance(package_info, dict):
        logger.info("Package info retrieved (unexpected shape)")
        return
    config = package_info.get('config') or {}
    links = package_info.get('links') or {}
    logger.info("Package info retrieved: name=%s type=%s artifactIds=%s webView=%s",
                package_info.get('name') or 'Unknown',
                config.get('type') or 'Unknown',
                config.get('artifactIds') or [],
                links.get('webView') or 'Unknown')


def upload_package(client: PackagistClient, package_name: str, file_path: str,
                   content_type: str = CONTENT_TYPE_ZIP) -> UploadResult:
    """
    Upload one artifact and verify it.

    Success depends on the upload alone; a failed verification only
    changes the reported URL.

    Raises:
        InputError: If the artifact cannot be read
        UploadError: If the registry rejects the upload
        HTTPError: If the upload request could not be sent
    """
    file_bytes = read_artifact(file_path)
    file_name = os.path.basename(file_path)
    logger.info("Found %s (%d bytes)", file_name, len(file_bytes))

    upload_result = client.upload_artifact(package_name, file_bytes, content_type, file_name)
    logger.info("Artifact uploaded successfully")
    logger.debug("Upload response: %s", upload_result)

    result = UploadResult(success=True, package_name=package_name, upload_result=upload_result)

    logger.info("Verifying the upload...")
    try:
        result.package_info = client.get_package_info(package_name)
    except VerificationError as e:
        logger.warning("Could not retrieve package info: %s", e)
        result.verification_error = str(e)
    else:
        _log_package_info(result.package_info)

    result.package_url = resolve_package_url(client, package_name, result.package_info)
    return result
