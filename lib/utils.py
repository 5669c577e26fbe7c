"""
Common utilities for LINE bot client.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def jsonDumps(data: Any, compact: Optional[bool] = None, **kwargs) -> str:
    dumpKwargs = {
        "ensure_ascii": False,
        "default": str,
        "sort_keys": True,
    }

    if compact is None:
        # If indent is passed, then user want pretty-printed JSON,
        #  no need to use compact separators
        compact = "indent" not in kwargs

    if compact:
        dumpKwargs["separators"] = (",", ":")
    dumpKwargs.update(kwargs)
    return json.dumps(data, **dumpKwargs)


def maskSecret(secret: Optional[str], visible: int = 4) -> str:
    """
    Mask secret for logging, keeping only last ``visible`` chars.

    Example:
        >>> maskSecret("abcdefgh")
        '****efgh'
    """
    if not secret:
        return ""
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]


def load_dotenv(path: str = ".env", populateEnv: bool = True) -> Dict[str, str]:
    """
    Simple dotenv file loader.
    Just read file line by line and put key-value pairs into dictionary.
    Missing file is not an error, empty dict is returned.

    Args:
        path: Path to .env file (default ".env")
        populateEnv: Whether to populate environment variables (default True),
            variables already set in environment are not overwritten

    Returns:
        Dictionary of key-value pairs from .env file
    """
    ret: Dict[str, str] = {}
    if not os.path.isfile(path):
        logger.debug(f"No dotenv file at {path}")
        return ret

    with open(path, "rt") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            splitted_line = line.split("=", 1)
            if len(splitted_line) == 2:
                key, value = splitted_line
                ret[key.strip()] = value.strip().strip('"')

    if populateEnv:
        for k, v in ret.items():
            os.environ.setdefault(k, v)
    return ret
