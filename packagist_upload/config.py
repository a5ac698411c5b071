"""
Input configuration for an upload run.

Values come from the command line first, then from GitHub Actions inputs
(``INPUT_<NAME>``), then from plain environment variables.
"""

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BASE_URL
from .exceptions import ConfigurationError, InputError


class UploadConfig(BaseSettings):
    """Everything needed to upload one artifact."""

    # blank GitHub Actions inputs fall through to the next alias
    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        populate_by_name=True,
        env_ignore_empty=True,
        str_strip_whitespace=True,
    )

    api_key: str = Field(
        default='',
        repr=False,
        validation_alias=AliasChoices('INPUT_API-KEY', 'PACKAGIST_API_KEY'),
    )
    api_secret: str = Field(
        default='',
        repr=False,
        validation_alias=AliasChoices('INPUT_API-SECRET', 'PACKAGIST_API_SECRET'),
    )
    package_name: str = Field(
        default='',
        validation_alias=AliasChoices('INPUT_PACKAGE-NAME', 'PACKAGIST_PACKAGE_NAME'),
    )
    file_path: str = Field(
        default='',
        validation_alias=AliasChoices('INPUT_FILE-PATH', 'PACKAGIST_FILE_PATH'),
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices('INPUT_PRIVATE-PACKAGIST-URL', 'PRIVATE_PACKAGIST_URL'),
    )

    def check_required(self):
        """
        Check that all required values are present.

        Raises:
            ConfigurationError: If the API key or secret is missing
            InputError: If the package name or file path is missing
        """
        if not self.api_key or not self.api_secret:
            raise ConfigurationError(
                "Missing required API credentials. Set PACKAGIST_API_KEY and "
                "PACKAGIST_API_SECRET or pass --api-key and --api-secret."
            )
        if not self.package_name:
            raise InputError("package-name is required")
        if not self.file_path:
            raise InputError("file-path is required")


def apply_overrides(config: UploadConfig, args) -> UploadConfig:
    """Replace configured values with the non-blank command line ones."""
    data = {}
    for name in UploadConfig.model_fields:
        value = getattr(args, name, None)
        if value and value.strip():
            data[name] = value.strip()
    return config.model_copy(update=data)


def load_config(args=None) -> UploadConfig:
    """
    Resolve the upload configuration.

    Args:
        args: Parsed command line namespace (attributes named like the
            UploadConfig fields; missing or blank values are ignored)

    Returns:
        UploadConfig, not yet checked for required values
    """
    return apply_overrides(UploadConfig(), args)


def read_artifact(file_path: str) -> bytes:
    """
    Read the artifact file.

    Raises:
        InputError: If the file does not exist, cannot be read or is empty
    """
    if not os.path.isfile(file_path):
        raise InputError(f"{file_path} not found. Please ensure the build process creates this file.")

    try:
        with open(file_path, 'rb') as f:
            contents = f.read()
    except OSError as e:
        raise InputError(f"Failed to read {file_path}: {e}") from e

    if not contents:
        raise InputError(f"Failed to read file contents: {file_path} is empty")

    return contents
