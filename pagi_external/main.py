from __future__ import annotations

import logging
from pathlib import Path

from pagi_external.core.logging import setup_logging
from pagi_external.core.settings import PagiConfig, load_config
from pagi_external.domain.exceptions import ConfigurationError

logger = logging.getLogger("pagi.bootstrap")


def bootstrap(*, env_file: str | Path | None = ".env", configure_logging: bool = True) -> PagiConfig:
    """Process entry point: configure logging and load configuration, or abort.

    Configuration errors are fatal here. Nothing downstream can run without the
    credential, so the process exits with status 1 instead of degrading.
    """

    if configure_logging:
        setup_logging()

    try:
        return load_config(env_file=env_file)
    except ConfigurationError as exc:
        logger.critical(
            "Fatal configuration error: %s",
            exc.message,
            extra={"env_var": getattr(exc, "env_var", None)},
        )
        raise SystemExit(1) from exc

