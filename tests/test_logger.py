import importlib

import pytest

import parse_torrent_file.logger
from parse_torrent_file.config import Config, TestConfig
from parse_torrent_file.logger import logger
from parse_torrent_file.pieces import split_pieces

from conftest import PIECE_A


def test_import_keeps_application_handlers():
    handler_id = logger.add(lambda message: None)
    importlib.reload(parse_torrent_file.logger)
    # raises ValueError if the handler was dropped
    logger.remove(handler_id)


@pytest.mark.skipif(bool(Config.LOG_PATH or Config.VERBOSE), reason="library logging enabled by environment")
def test_silent_until_enabled():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level=TestConfig.LOG_LEVEL)
    try:
        split_pieces(PIECE_A + b"0123456789")
        assert messages == []

        logger.enable("parse_torrent_file")
        split_pieces(PIECE_A + b"0123456789")
        assert any("not a multiple of 20" in message for message in messages)
    finally:
        logger.remove(handler_id)
        logger.disable("parse_torrent_file")
