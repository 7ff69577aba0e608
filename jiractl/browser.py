"""Opening URLs in a web browser."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import webbrowser


def browser_from_env() -> str:
    """The browser command from JIRA_BROWSER, else BROWSER, else empty."""
    return os.environ.get("JIRA_BROWSER") or os.environ.get("BROWSER") or ""


def browse(url: str) -> None:
    """Open ``url`` with the configured browser command or the system default."""
    opener = browser_from_env()
    if not opener:
        if not webbrowser.open(url):
            raise OSError(f"could not open {url} in a browser")
        return

    args = shlex.split(opener)
    if not args:
        raise ValueError("empty browser command")
    exe = shutil.which(args[0])
    if exe is None:
        raise FileNotFoundError(f"executable not found: {args[0]}")

    subprocess.run(
        [exe, *args[1:], url],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=True,
    )