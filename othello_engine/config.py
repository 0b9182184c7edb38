"""
Engine configuration and logging setup.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path


def _default_log_dir() -> Path:
    return Path.home() / ".othello_engine"


@dataclass
class EngineConfig:
    """Runtime settings for the console front-end and tools.

    Search depth is fixed (see othello_engine.search.SEARCH_DEPTH) and
    deliberately not part of this config.
    """

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_to_file: bool = False
    """Write the log to ``log_dir / log_file_name``"""

    log_dir: Path = field(default_factory=_default_log_dir)
    """Directory for the log file"""

    log_file_name: str = "engine.log"
    """Name of the log file inside ``log_dir``"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_dir = Path(self.log_dir)

        if not self.log_file_name or Path(self.log_file_name).name != self.log_file_name:
            raise ValueError(
                f"log_file_name must be a plain file name, got {self.log_file_name!r}"
            )

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO

    @property
    def log_file(self) -> Path:
        return self.log_dir / self.log_file_name


def setup_logger(config: EngineConfig) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        config: Engine configuration

    Returns:
        The "othello_engine" logger, with a file handler if
        config.log_to_file is set and a NullHandler otherwise
    """
    logger = logging.getLogger("othello_engine")
    logger.setLevel(config.log_level)

    logger.handlers.clear()

    if config.log_to_file:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(config.log_file, mode='w')
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)

    return logger
