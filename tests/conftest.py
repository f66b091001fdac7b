"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
from dotenv import load_dotenv

# Load .env file at test collection time
load_dotenv(Path(__file__).parent.parent / ".env")


def make_file_diff(name: str, size: int) -> str:
    """Build a single-file diff of exactly ``size`` characters."""
    header = (
        f"diff --git a/{name} b/{name}\n"
        f"index 1111111..2222222 100644\n"
        f"--- a/{name}\n"
        f"+++ b/{name}\n"
        f"@@ -1,1 +1,1 @@\n"
    )
    body = size - len(header)
    assert body >= 2, "size too small for a diff header"
    return header + "+" + "x" * (body - 2) + "\n"


def make_hunk(start: int, size: int) -> str:
    """Build a hunk of exactly ``size`` characters."""
    head = f"@@ -{start},3 +{start},3 @@\n"
    body = size - len(head)
    return head + "+" + "y" * (body - 2) + "\n"


@pytest.fixture
def char_estimate():
    """One token per character: deterministic and additive."""
    return len


@pytest.fixture
def sample_diff() -> str:
    """A small realistic two-file diff."""
    return (
        "diff --git a/src/app.py b/src/app.py\n"
        "index ad4db42..f3b18a9 100644\n"
        "--- a/src/app.py\n"
        "+++ b/src/app.py\n"
        "@@ -1,4 +1,4 @@\n"
        " import os\n"
        "-PORT = 7799\n"
        "+PORT = int(os.environ.get('PORT', 7799))\n"
        " \n"
        "@@ -20,3 +20,4 @@ def main():\n"
        "     app.run(port=PORT)\n"
        "+    log.info('started')\n"
        "diff --git a/README.md b/README.md\n"
        "index 1234567..89abcde 100644\n"
        "--- a/README.md\n"
        "+++ b/README.md\n"
        "@@ -1 +1,2 @@\n"
        " # App\n"
        "+Set PORT to change the listening port.\n"
    )


@pytest.fixture
def file_diff():
    return make_file_diff


@pytest.fixture
def hunk():
    return make_hunk
