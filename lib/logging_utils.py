"""
Logging setup for the Geo-6 POI geocoder.

Driven by the ``[logging]`` section of config.toml:
    level = "INFO"                  # root level
    format = "..."                  # optional, DEFAULT_LOG_FORMAT otherwise
    console = true                  # log to stderr
    file = "logs/geo6-poi.log"      # log to file
    rotate = true                   # rotate the file at midnight, keep a week

    [logging.logger."lib.geo6_poi"] # same keys, for one logger
    level = "DEBUG"
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROTATE_BACKUP_COUNT = 7
# Loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, levelStr.upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def _createFileHandler(logFile: str, rotate: bool) -> Optional[logging.Handler]:
    try:
        Path(logFile).parent.mkdir(parents=True, exist_ok=True)
        if rotate:
            return TimedRotatingFileHandler(
                filename=logFile,
                when="midnight",
                backupCount=ROTATE_BACKUP_COUNT,
                encoding="utf-8",
            )
        return logging.FileHandler(logFile, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to setup file logging to {logFile}: {e}")
        return None


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Replace handlers of one logger according to a [logging] style section, dood!"""
    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    # Reconfiguring must not duplicate output
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    handlers: List[logging.Handler] = []
    if config.get("console", False):
        handlers.append(logging.StreamHandler())
    if "file" in config:
        fileHandler = _createFileHandler(config["file"], bool(config.get("rotate", False)))
        if fileHandler is not None:
            handlers.append(fileHandler)

    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))
    for handler in handlers:
        handler.setFormatter(formatter)
        localLogger.addHandler(handler)
        logger.debug(f"Logger {localLogger.name or 'root'} writes to {type(handler).__name__}")


def initLogging(config: Dict[str, Any]) -> None:
    """Configure root logger and per-logger overrides from the [logging] section."""
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.INFO)
    configureLogger(rootLogger, config)

    logLevel = rootLogger.getEffectiveLevel()
    if logLevel < logging.WARNING:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: root level={logging.getLevelName(logLevel)}")
