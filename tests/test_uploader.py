"""
Tests for upload orchestration and result resolution.
"""

import json
import re
from unittest.mock import Mock, patch

import pytest

from packagist_upload import (
    PackagistClient,
    InputError,
    NotFoundError,
    UploadResult,
    upload_package
)
from packagist_upload.uploader import resolve_package_url


def make_response(status_code=200, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = json.dumps(payload) if payload is not None else text
    if payload is not None:
        response.json.return_value = payload
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    return response


@pytest.fixture
def client():
    return PackagistClient("test-key", "test-secret", "https://packagist.example.com")


@pytest.fixture
def artifact(tmp_path):
    path = tmp_path / "package.zip"
    path.write_bytes(b"PK\x03\x04\x14\x00\x00\x00\x08\x00")
    return path


class TestResolvePackageURL:
    """Test package URL selection."""

    def test_web_view(self, client):
        info = {"links": {"webView": "https://packagist.example.com/orgs/acme/packages/1"}}

        assert resolve_package_url(client, "acme/package", info) == \
            "https://packagist.example.com/orgs/acme/packages/1"

    @pytest.mark.parametrize("info", [
        None,
        {},
        {"links": None},
        {"links": {}},
        {"links": {"webView": ""}},
        {"name": "acme/package", "config": {"type": "artifact"}},
        ["not", "a", "dict"],
    ])
    def test_fallback(self, client, info):
        assert resolve_package_url(client, "acme/package", info) == \
            "https://packagist.example.com/packages/acme/package"


class TestUploadPackage:
    """Test the upload, verify, resolve sequence."""

    @patch('packagist_upload.client.requests.Session.request')
    def test_success_with_web_view(self, mock_request, client, artifact):
        upload = {"status": "success"}
        info = {
            "name": "acme/package",
            "config": {"type": "artifact", "artifactIds": [1, 2]},
            "links": {"webView": "https://packagist.example.com/orgs/acme/packages/1"}
        }
        mock_request.side_effect = [make_response(201, upload), make_response(200, info)]

        result = upload_package(client, "acme/package", str(artifact))

        assert result.success is True
        assert result.package_name == "acme/package"
        assert result.upload_result == upload
        assert result.package_info == info
        assert result.package_url == "https://packagist.example.com/orgs/acme/packages/1"
        assert result.verification_error is None

        calls = mock_request.call_args_list
        assert [c[0][0] for c in calls] == ['POST', 'GET']
        assert calls[0][1]['data'] == artifact.read_bytes()
        assert calls[0][1]['headers']['X-FILENAME'] == "package.zip"
        assert calls[0][1]['headers']['Content-Type'] == "application/zip"

    @patch('packagist_upload.client.requests.Session.request')
    def test_verification_failure_is_not_fatal(self, mock_request, client, artifact):
        """Test that a failed verification keeps success and falls back."""
        mock_request.side_effect = [make_response(201, {"status": "success"}),
                                    make_response(500, text="Internal Server Error")]

        result = upload_package(client, "acme/package", str(artifact))

        assert result.success is True
        assert result.package_url == "https://packagist.example.com/packages/acme/package"
        assert result.verification_error == "HTTP 500: Internal Server Error"
        assert result.package_info is None

    @patch('packagist_upload.client.requests.Session.request')
    def test_verification_without_web_view(self, mock_request, client, artifact):
        mock_request.side_effect = [make_response(201, {}), make_response(200, {"name": "acme/package"})]

        result = upload_package(client, "acme/package", str(artifact))

        assert result.success is True
        assert result.package_url == "https://packagist.example.com/packages/acme/package"
        assert result.verification_error is None

    @patch('packagist_upload.client.requests.Session.request')
    def test_upload_not_found(self, mock_request, client, artifact):
        """Test that an upload failure stops before verification."""
        mock_request.return_value = make_response(404, text="Package acme/package not found")

        with pytest.raises(NotFoundError) as exc_info:
            upload_package(client, "acme/package", str(artifact))

        assert exc_info.value.status_code == 404
        assert "404" in str(exc_info.value)
        assert "Package acme/package not found" in str(exc_info.value)
        mock_request.assert_called_once()

    @patch('packagist_upload.client.requests.Session.request')
    def test_missing_file(self, mock_request, client, tmp_path):
        with pytest.raises(InputError, match="not found"):
            upload_package(client, "acme/package", str(tmp_path / "missing.zip"))

        mock_request.assert_not_called()

    @patch('packagist_upload.client.requests.Session.request')
    def test_empty_file(self, mock_request, client, tmp_path):
        path = tmp_path / "empty.zip"
        path.write_bytes(b"")

        with pytest.raises(InputError):
            upload_package(client, "acme/package", str(path))

        mock_request.assert_not_called()

    @patch('packagist_upload.client.requests.Session.request')
    def test_distinct_headers(self, mock_request, client, artifact):
        mock_request.side_effect = [make_response(201, {}), make_response(200, {})]

        upload_package(client, "acme/package", str(artifact))

        upload_header, verify_header = [c[1]['headers']['Authorization'] for c in mock_request.call_args_list]
        assert re.search(r"Cnonce=(\w+)", upload_header).group(1) != \
            re.search(r"Cnonce=(\w+)", verify_header).group(1)


def test_upload_result_defaults():
    result = UploadResult(success=False, package_name="acme/package")

    assert result.package_url == ""
    assert result.error is None
