"""Command entry point: logging, configuration and the startup command."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .backend import select_backend
from .config import Configs

log = logging.getLogger(__name__)

_LOG_DIR = "logs"
_LOG_FILE = "app.log"
_CONFIG_PATH = Path(__file__).with_name("mondrian.conf")


def parse_args(argv: Sequence[str] | None = None) -> str | None:
    """The program given with ``-c``/``--command``, if any."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) >= 2 and args[0] in ("-c", "--command"):
        return args[1]
    return None


def _setup_logging() -> None:
    log_dir = Path(_LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        log_dir / _LOG_FILE, when="midnight", encoding="utf-8"
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    file_handler.setFormatter(formatter)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logging.basicConfig(
        level=logging.INFO, handlers=[stream_handler, file_handler], force=True
    )


def _load_configs() -> Configs:
    if _CONFIG_PATH.is_file():
        return Configs.from_file(_CONFIG_PATH)
    return Configs()


def main(argv: Sequence[str] | None = None) -> int:
    """Initialise the compositor and start the optional startup command."""
    _setup_logging()

    backend = select_backend()
    log.info("Backend: %s", backend.value)

    configs = _load_configs()
    configs.init()

    command = parse_args(argv)
    if command is not None:
        try:
            subprocess.Popen([command])
        except (OSError, ValueError) as err:
            log.debug("Failed to start '%s': %s", command, err)

    log.info("Initialization completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())