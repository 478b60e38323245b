from abc import ABC, abstractmethod

# ordered lowest to highest; WARN is the name written to the log lines
LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
LEVEL_ALIASES = {"WARNING": "WARN"}


class Logger(ABC):
    """Structured event logger.

    Every call takes a short snake_case event name plus keyword data, e.g.
    ``logger.info("pack_opened", pack_type="play", cards=14)``.
    Calls below ``min_level`` are dropped before reaching ``emit``.
    """

    def __init__(self, log_type: str = "server", min_level: str = "DEBUG"):
        self.log_type = log_type
        level = min_level.upper()
        level = LEVEL_ALIASES.get(level, level)
        # unknown names fall back to the INFO default
        self.min_level = level if level in LEVELS else "INFO"

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.min_level]

    @abstractmethod
    def emit(self, level: str, msg: str, data: dict): ...

    def _log(self, level, msg, data):
        if self.enabled_for(level):
            self.emit(level, msg, data)

    def info(self, msg: str, **data):
        self._log("INFO", msg, data)

    def debug(self, msg: str, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg: str, **data):
        self._log("WARN", msg, data)

    def error(self, msg: str, **data):
        self._log("ERROR", msg, data)
