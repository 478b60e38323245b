from booster_logs.base import Logger


class CompositeLogger(Logger):
    """Fans every event out to several loggers; each applies its own level."""

    def __init__(self, *loggers: Logger):
        super().__init__(log_type=loggers[0].log_type if loggers else "server")
        self.loggers = loggers

    def emit(self, level, msg, data):
        for l in self.loggers:
            l._log(level, msg, data)
