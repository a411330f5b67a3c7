"""Load alias configuration from YAML, TOML, or JSON files.

Expected layout (JSON shown)::

    {"aliases": {"legends": "hockey_legends", "no": "number"}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .factory import QueryFactory
from .identifiers import AliasResolver

log = logging.getLogger("dbquery.config")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a configuration dict from a file, dispatched by extension.

    Supported extensions: ``.json``, ``.toml``, ``.yaml`` / ``.yml``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == '.json':
        with open(path) as f:
            return json.load(f)

    if suffix == '.toml':
        return _load_toml(path)

    if suffix in ('.yaml', '.yml'):
        return _load_yaml(path)

    raise ValueError(
        f"Unsupported config file extension {suffix!r}. "
        "Use .json, .toml, .yaml, or .yml."
    )


def resolver_from_config(path: str | Path) -> AliasResolver:
    """Build an :class:`AliasResolver` from the ``aliases`` table of a config file."""
    data = load_config(path) or {}
    aliases = data.get('aliases', {})
    if not isinstance(aliases, dict):
        raise ValueError(
            f"'aliases' must be a mapping, got {type(aliases).__name__}"
        )
    log.debug("Loaded %d aliases from %s", len(aliases), path)
    return AliasResolver(aliases)


def factory_from_config(path: str | Path) -> QueryFactory:
    """Build a :class:`QueryFactory` from a config file."""
    return QueryFactory(resolver_from_config(path))


# ── Internal loaders ─────────────────────────────────────────────

def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML using ``tomllib`` (3.11+) or ``tomli``."""
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            raise ImportError(
                "TOML support requires Python 3.11+ (built-in tomllib) "
                "or the 'tomli' package. Install with: pip install dbquery[toml]"
            )
    with open(path, 'rb') as f:
        return tomllib.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML using ``pyyaml``."""
    try:
        import yaml
    except ModuleNotFoundError:
        raise ImportError(
            "YAML support requires the 'pyyaml' package. "
            "Install with: pip install dbquery[yaml]"
        )
    with open(path) as f:
        return yaml.safe_load(f)
