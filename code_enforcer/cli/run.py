import asyncio
import logging
from pathlib import Path

from code_enforcer.cli.exitcodes import exit_code_for
from code_enforcer.core.config import EnforcerConfig, load_config
from code_enforcer.core.engine import Enforcer
from code_enforcer.core.errors import ConfigurationError
from code_enforcer.reporting.renderers.json import JsonReportRenderer
from code_enforcer.reporting.renderers.text import TextReportRenderer

logger = logging.getLogger(__name__)


def resolve_config(config_file: str, root: Path) -> EnforcerConfig:
    """
    Load the config file; on any problem print a notice and fall back to
    the defaults so the run can proceed.
    """
    path = Path(config_file)
    if not path.is_absolute():
        path = root / path
    try:
        return load_config(path)
    except ConfigurationError as e:
        print(f"failed to read {path}: {e}")
        logger.debug("using default configuration (%s)", e.code)
        return EnforcerConfig()


def run(*, config_file: str, root: str, solutions: bool, fmt: str) -> int:
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        raise FileNotFoundError(f"Project root does not exist: {root_path}")

    config = resolve_config(config_file, root_path)
    enforcer = Enforcer(config, root=root_path)
    diagnostics = asyncio.run(enforcer.run())

    if fmt == "json":
        out = JsonReportRenderer().render(diagnostics)
    else:
        out = TextReportRenderer(show_solutions=solutions).render(diagnostics)
    print(out, end="")

    return exit_code_for(diagnostics)
