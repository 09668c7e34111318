import sys

from loguru import logger

from .config import Config


VERBOSE = Config.VERBOSE
LOG_PATH = Config.LOG_PATH
LOG_LEVEL = Config.LOG_LEVEL
LOG_ROTATION = Config.LOG_ROTATION
LOG_RETENTION = Config.LOG_RETENTION


# Silent inside host applications unless configured; they opt in with
# logger.enable("parse_torrent_file")
if not (LOG_PATH or VERBOSE):
    logger.disable("parse_torrent_file")

# Log to a file
if LOG_PATH:
    logger.add(
        LOG_PATH,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level=LOG_LEVEL,
        filter="parse_torrent_file",
    )

# Log to console
if VERBOSE:
    logger.add(
        sys.stderr,
        level=LOG_LEVEL,
        filter="parse_torrent_file",
    )
