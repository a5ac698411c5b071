import pytest

CONFIG_VARIABLES = [
    'INPUT_API-KEY', 'PACKAGIST_API_KEY',
    'INPUT_API-SECRET', 'PACKAGIST_API_SECRET',
    'INPUT_PACKAGE-NAME', 'PACKAGIST_PACKAGE_NAME',
    'INPUT_FILE-PATH', 'PACKAGIST_FILE_PATH',
    'INPUT_PRIVATE-PACKAGIST-URL', 'PRIVATE_PACKAGIST_URL',
    'GITHUB_OUTPUT',
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's environment out of configuration lookups."""
    for name in CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
