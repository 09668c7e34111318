import bencodepy
import pytest

from parse_torrent_file.config import TestConfig
from parse_torrent_file.logger import logger


# ASCII-only bytes survive the pieces buffer round trip through UTF-8
PIECE_A = bytes(range(20))
PIECE_B = b"0123456789abcdefghij"


def make_torrent(info, fields=None):
    torrent = {b"info": info}
    torrent.update(fields or {})
    return torrent


@pytest.fixture
def single_file_info():
    return {
        b"name": b"a.txt",
        b"piece length": 16384,
        b"length": 100,
        b"pieces": PIECE_A,
    }


@pytest.fixture
def multi_file_info():
    return {
        b"name": b"album",
        b"piece length": 64,
        b"pieces": PIECE_A + PIECE_B,
        b"files": [
            {b"length": 50, b"path": [b"disc1", b"01.flac"]},
            {b"length": 70, b"path": [b"02.flac"]},
        ],
    }


@pytest.fixture
def torrent_bytes(multi_file_info):
    return bencodepy.encode({
        b"announce": b"http://tracker.example/announce",
        b"announce-list": [
            [b"http://tracker.example/announce", b"http://backup.example/announce"],
            [b"udp://tracker.example:6969"],
        ],
        b"comment": b"test album",
        b"created by": b"mktorrent 1.1",
        b"creation date": 1700000000,
        b"info": multi_file_info,
        b"url-list": [b"http://seed.example/album/"],
    })


@pytest.fixture
def torrent_path(tmp_path, torrent_bytes):
    path = tmp_path / "album.torrent"
    path.write_bytes(torrent_bytes)
    return path


@pytest.fixture
def log_messages():
    messages = []
    logger.enable("parse_torrent_file")
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level=TestConfig.LOG_LEVEL,
        filter="parse_torrent_file",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("parse_torrent_file")
