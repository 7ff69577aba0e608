"""Version and build information."""

from __future__ import annotations

import platform
import sys
from datetime import datetime, timezone
from importlib import metadata

VERSION = "v0.0.0-dev"
GIT_COMMIT = ""
SOURCE_DATE_EPOCH = "-1"
PYTHON_VERSION = platform.python_version()
COMPILER = platform.python_implementation()
PLATFORM = f"{sys.platform}/{platform.machine()}"


def _installed_version() -> str | None:
    try:
        return metadata.version("jiractl")
    except metadata.PackageNotFoundError:
        return None


_installed = _installed_version()
if VERSION == "v0.0.0-dev" and _installed:
    VERSION = _installed


def info() -> str:
    """Return version and build information; a malformed epoch raises ValueError."""
    epoch = int(SOURCE_DATE_EPOCH)
    commit_date = ""
    if epoch >= 0:
        commit_date = datetime.fromtimestamp(epoch, timezone.utc).isoformat()
    return (
        f'(Version="{VERSION}", GitCommit="{GIT_COMMIT}", CommitDate="{commit_date}", '
        f'PythonVersion="{PYTHON_VERSION}", Compiler="{COMPILER}", Platform="{PLATFORM}")'
    )