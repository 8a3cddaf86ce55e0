import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from diffall.api.config.LogConfig import LogConfig

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, log_config: LogConfig | None = None) -> None:
    """Configure the ``diffall`` logger to write to ``<home>/diffall.log``.

    Args:
        home: diffall home directory. If None, derived from the environment.
        log_config: Level and rotation settings; defaults when None.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from diffall.api.config.DiffallConfig import DiffallConfig

        home = DiffallConfig.get_home_dir()
    log_config = log_config or LogConfig()

    root_logger = logging.getLogger("diffall")
    root_logger.setLevel(getattr(logging, log_config.level))

    try:
        home.mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = RotatingFileHandler(
            home / "diffall.log",
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
        )
    except OSError:
        # Unwritable home: keep the logger quiet rather than failing the diff
        file_handler = logging.NullHandler()

    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
