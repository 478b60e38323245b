from booster_logs.stdout import StdoutLogger
from booster_logs.file import FileLogger
from booster_logs.json import JSONLogger
from booster_logs.composite import CompositeLogger


def get_logger(mode="dev", log_type="server", min_level="INFO", base_path="logs"):
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, base_path=base_path, min_level=min_level),
            JSONLogger(log_type=log_type, min_level=min_level)
        )
    return StdoutLogger(log_type=log_type, min_level=min_level)
