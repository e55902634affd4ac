"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from headerdoc.deep_merge import deep_merge
from headerdoc.type_naming import DEFAULT_TYPE_PREFIXES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "sources": {
        "extensions": [".h", ".hpp"],
        "ignore_files": [],
    },
    "parser": {
        # Lines starting with these are dropped before classification.
        "ignore_prefixes": ["//~", "DECLARE_"],
        "type_prefixes": DEFAULT_TYPE_PREFIXES,
        # False keeps the single-flag `#if`/`#endif` skip.
        "nested_conditionals": False,
    },
    "output": {
        "extension": ".mdx",
        "marker": "## File Info",
        "access_levels": ["public", "protected", "private"],
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config
