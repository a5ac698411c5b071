"""
Command line entry point.

Usage:
    packagist-upload --package-name acme/package --file-path dist/package.zip

Credentials are read from --api-key/--api-secret, the GitHub Actions inputs
or PACKAGIST_API_KEY/PACKAGIST_API_SECRET.
"""

import argparse
import logging
import sys

from . import __version__
from .client import PackagistClient
from .config import load_config
from .constants import CONTENT_TYPE_ZIP, DEFAULT_CONFIG
from .exceptions import PackagistUploadError, RegistryResponseError
from .log import get_logger, redact
from .outputs import write_outputs
from .uploader import UploadResult, upload_package


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packagist-upload",
        description="Upload an artifact to Private Packagist"
    )
    parser.add_argument("--api-key", dest="api_key", help="API token key")
    parser.add_argument("--api-secret", dest="api_secret", help="API token secret")
    parser.add_argument("--package-name", dest="package_name", help="Package name, e.g. acme/package")
    parser.add_argument("--file-path", dest="file_path", help="Artifact to upload")
    parser.add_argument("--url", dest="base_url", help="Private Packagist URL (default: https://packagist.com)")
    parser.add_argument("--content-type", default=CONTENT_TYPE_ZIP, help="Artifact MIME type")
    parser.add_argument("--timeout", type=float, default=DEFAULT_CONFIG['timeout'],
                        help="HTTP timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    config = load_config(args)
    result = UploadResult(success=False, package_name=config.package_name)

    try:
        config.check_required()
        logger.info("Target package: %s", config.package_name)

        with PackagistClient(config.api_key, config.api_secret, config.base_url,
                             timeout=args.timeout) as client:
            result = upload_package(client, config.package_name, config.file_path,
                                    args.content_type)
    except PackagistUploadError as e:
        message = redact(str(e), [config.api_secret, config.api_key])
        logger.error("Upload failed: %s", message)
        if isinstance(e, RegistryResponseError) and e.status_code == 404:
            logger.error("Make sure the package %s exists on Private Packagist", config.package_name)
        result.error = message
        write_outputs(result)
        return 1

    logger.info("Upload complete. Package available at: %s", result.package_url)
    logger.info("To install: composer require %s", result.package_name)
    write_outputs(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
