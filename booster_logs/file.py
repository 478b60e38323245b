from booster_logs.base import Logger
from datetime import datetime, timezone
from pathlib import Path
import json


class FileLogger(Logger):
    """Appends one JSON object per event to ``<base_path>/<log_type>.log``."""

    def __init__(self, log_type="server", base_path="logs", min_level="DEBUG"):
        super().__init__(log_type=log_type, min_level=min_level)
        self.path = Path(base_path) / f"{log_type}.log"

        # Ensure directory exists
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, level, msg, data):
        ts = datetime.now(timezone.utc).isoformat()
        with open(self.path, "a") as f:
            f.write(json.dumps({
                "ts": ts,
                "log_type": self.log_type,
                "level": level,
                "event": msg,
                **data
            }, default=str) + "\n")
