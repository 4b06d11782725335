# delivery_zones/logging_utils.py

import logging

from .config import LOG_LEVEL

def get_logger(module_name, level=LOG_LEVEL):
    logger = logging.getLogger(f"delivery_zones.{module_name}")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(level)
    return logger
