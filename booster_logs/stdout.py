from booster_logs.base import Logger
from datetime import datetime, timezone


class StdoutLogger(Logger):

    def emit(self, level, msg, data):
        ts = datetime.now(timezone.utc).isoformat()
        print(f"[{ts}] [{self.log_type}] {level} {msg} {data}")
