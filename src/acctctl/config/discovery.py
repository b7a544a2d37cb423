"""Config file discovery.

Walk-up finder locates acctctl.toml from the working directory.
ACCTCTL_CONFIG and the --config CLI flag override discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "acctctl.toml"
CONFIG_ENV_VAR = "ACCTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for acctctl.toml.

    ACCTCTL_CONFIG wins when set; a dangling env path means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
