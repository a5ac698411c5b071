"""
GitHub Actions step outputs.
"""

import json
import os
import secrets
from typing import Dict, Optional

from .uploader import UploadResult


def result_outputs(result: UploadResult) -> Dict[str, str]:
    """Map a result onto the step output names."""
    return {
        'success': 'true' if result.success else 'false',
        'package-name': result.package_name,
        'upload-result': json.dumps(result.upload_result, separators=(',', ':')),
        'package-url': result.package_url,
    }


def format_output(name: str, value: str) -> str:
    if '\n' not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{secrets.token_hex(8)}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def write_outputs(result: UploadResult, path: Optional[str] = None) -> bool:
    """
    Append the result to the GitHub Actions output file.

    Args:
        result: Upload outcome
        path: Output file, defaults to $GITHUB_OUTPUT

    Returns:
        True if anything was written
    """
    path = path or os.environ.get('GITHUB_OUTPUT')
    if not path:
        return False

    with open(path, 'a', encoding='utf-8') as f:
        for name, value in result_outputs(result).items():
            f.write(format_output(name, value))
    return True
