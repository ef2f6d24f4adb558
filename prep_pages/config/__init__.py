"""Load and validate the session prep configuration YAML.

This subpackage parses a ``prep.yaml`` file and produces a
:class:`PrepConfig` holding the journal naming, layout, and carry-forward
switches that the session generator consumes. It stands in for the host's
world settings so the engine never reads global state.

Examples
--------
>>> from pathlib import Path
>>> from prep_pages.config import load_prep_config
>>> config = load_prep_config(Path("prep.yaml"))  # doctest: +SKIP
>>> config.separate_pages  # doctest: +SKIP
True
"""

from .loader import load_prep_config
from .models import PrepConfig, PrepConfigError

__all__ = ["PrepConfig", "PrepConfigError", "load_prep_config"]
