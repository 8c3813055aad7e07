from __future__ import annotations

from typing import Optional

from dynaconf import Dynaconf

from policygraph.config.constants import DEFAULTS
from policygraph.config.settings import (
    AssemblyConfig,
    GraphConfig,
    PolicyGraphConfig,
)
from policygraph.subproblem.provider import OptimizerFactory


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="POLICYGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def load_config(optimizer: Optional[OptimizerFactory] = None) -> PolicyGraphConfig:
    """
    Build a PolicyGraphConfig from POLICYGRAPH_* environment variables,
    falling back to DEFAULTS.

    Optimizers cannot be described by environment variables, so an
    optimizer factory may be passed explicitly.
    """
    settings = _settings()

    return PolicyGraphConfig(
        graph=GraphConfig(
            probability_tolerance=float(
                settings.get(
                    "PROBABILITY_TOLERANCE",
                    DEFAULTS["PROBABILITY_TOLERANCE"],
                )
            ),
        ),
        assembly=AssemblyConfig(
            direct_mode=bool(settings.get("DIRECT_MODE", DEFAULTS["DIRECT_MODE"])),
            optimizer=optimizer,
        ),
    )
