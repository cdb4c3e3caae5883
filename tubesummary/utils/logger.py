import os
import sys
import logging

from tubesummary.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = str(config.LOG_DIR)
loging_path = os.path.join(logging_dir, "tubesummary.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
if not os.path.exists(loging_path):
    with open(loging_path, "w") as f:
        pass
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(loging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('tubesummary')
