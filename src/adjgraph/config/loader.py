from __future__ import annotations

import logging
from typing import Any

from dynaconf import Dynaconf

from adjgraph.config.constants import DEFAULTS
from adjgraph.config.settings import GraphConfig


def load_settings() -> Dynaconf:
    """
    Fresh settings view over ADJGRAPH_* environment variables.
    """
    return Dynaconf(
        envvar_prefix="ADJGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def _flag(settings: Dynaconf, key: str) -> bool:
    # dynaconf only parses TOML literals; "off"/"no" need the @bool converter
    return settings.get(key, DEFAULTS[key], cast="@bool")


def load_config(**overrides: Any) -> GraphConfig:
    """
    Build a GraphConfig from defaults, then environment, then keyword overrides.
    """
    settings = load_settings()

    values = {
        "directed": _flag(settings, "DIRECTED"),
        "edge_policy": str(settings.get("EDGE_POLICY", DEFAULTS["EDGE_POLICY"])),
        "check_invariants": _flag(settings, "CHECK_INVARIANTS"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    config = GraphConfig(**values)
    logging.getLogger("adjgraph.config").debug("loaded config=%s", config)
    return config
