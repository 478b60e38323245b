from booster_logs.chooseLogType import get_logger
import os

env = os.getenv("ENV", "dev")
log_level = os.getenv("LOG_LEVEL", "INFO")
log_dir = os.getenv("LOG_DIR", "logs")

server_logger = get_logger(mode=env, log_type="server", min_level=log_level, base_path=log_dir)
booster_logger = get_logger(mode=env, log_type="booster", min_level=log_level, base_path=log_dir)
