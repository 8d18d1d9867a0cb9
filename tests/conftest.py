"""Shared test fixtures and configuration for pyzypper test suite."""

import stat
from pathlib import Path
from typing import Callable
from unittest.mock import AsyncMock, patch

import pytest

from pyzypper.client import Client

SEARCH_XML = b"""<?xml version='1.0'?>
<stream>
<search-result version="0.0">
<solvable-list>
<solvable status="installed" name="vim" kind="package" edition="9.1.0836-1.1" arch="x86_64" repository="repo-oss"/>
<solvable status="not-installed" name="vim" kind="package" edition="9.1.0836-1.1" arch="i586" repository="repo-oss"/>
<solvable status="not-installed" name="patterns-base-enhanced_base" kind="pattern" edition="20200505-57.1" arch="x86_64" repository="repo-update"/>
</solvable-list>
</search-result>
</stream>
"""

EMPTY_SEARCH_XML = b"""<?xml version='1.0'?>
<stream>
<search-result version="0.0">
<solvable-list>
</solvable-list>
</search-result>
</stream>
"""


@pytest.fixture
def search_xml() -> bytes:
    """Sample output of ``zypper --xmlout search --details vim``.

    Returns:
        bytes: XML document with three solvables.
    """
    return SEARCH_XML


@pytest.fixture
def empty_search_xml() -> bytes:
    """Sample search output with an empty solvable list.

    Returns:
        bytes: XML document with no solvables.
    """
    return EMPTY_SEARCH_XML


@pytest.fixture
def make_script(tmp_path: Path) -> Callable[[str], str]:
    """Create executable shell scripts that stand in for zypper.

    Returns:
        Callable taking a script body and returning the script's path.
    """
    counter = iter(range(1000))

    def _make(body: str) -> str:
        script = tmp_path / f"zypper-{next(counter)}"
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return str(script)

    return _make


@pytest.fixture
def mock_runner() -> AsyncMock:
    """Create a mock process runner returning empty output.

    Returns:
        AsyncMock: Runner whose ``run`` coroutine can be scripted per test.
    """
    runner = AsyncMock()
    runner.run = AsyncMock(return_value=b"")
    return runner


@pytest.fixture
def client(mock_runner) -> Client:
    """Create a Client wired to the mock runner, without probing zypper.

    Returns:
        Client: Client whose path is '/usr/bin/zypper'.
    """
    with patch("pyzypper.client.locate_executable", return_value="/usr/bin/zypper"):
        return Client(path="/usr/bin/zypper", runner=mock_runner)
