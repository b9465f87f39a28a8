# directus_sync/utils/logger.py
import logging
import sys

LEVELS = {"ERROR": 40, "WARN": 30, "INFO": 20, "DEBUG": 10, "NONE": 100}
FORMAT = "[%(asctime)s][%(levelname)s] %(message)s"

_logger = logging.getLogger("directus_sync")

def configure(level: str = "INFO"):
    _logger.setLevel(LEVELS.get((level or "INFO").upper(), 20))
    if not _logger.handlers:
        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(logging.Formatter(FORMAT, "%H:%M:%S"))
        _logger.addHandler(sh)

def debug(msg): _logger.debug(msg)
def info(msg):  _logger.info(msg)
def warn(msg):  _logger.warning(msg)
def error(msg, exc_info=False): _logger.error(msg, exc_info=exc_info)
