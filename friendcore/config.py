"""Access to settings kept in the environment and in a local ``.env`` file."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE = ".env"


def config(key: str) -> str:
    """Return the value of ``key``, loading ``.env`` from the working directory first.

    Variables already set in the environment are not overridden by the file.
    If the file cannot be loaded, a notice is printed and the lookup still
    falls back to the environment. A missing key yields an empty string.
    """
    path = Path(ENV_FILE)
    try:
        if not path.is_file():
            raise FileNotFoundError(ENV_FILE)
        load_dotenv(path, override=False)
    except OSError:
        print("Error loading .env file", end="")
    return os.environ.get(key, "")