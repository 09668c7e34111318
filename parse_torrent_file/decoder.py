"""
Decoding of bencoded torrent files into Metadata.

decode() accepts the raw bytes of a .torrent file or a dictionary that has
already been parsed with bencodepy. Only the required fields are enforced;
every optional field is either normalized to a default or left out.
"""

from collections.abc import Mapping
from datetime import datetime, timezone

import bencodepy

from .config import Config
from .errors import InvalidTorrentFileError, TorrentFileError
from .fields import copy_value, get_bytes, get_dict, get_int, get_list, is_text, lookup, to_text
from .layout import build_layout
from .logger import logger
from .metadata import Metadata
from .pieces import split_pieces
from .validator import validate


def parse(data):
    """Parse raw bencoded bytes into a dictionary."""
    try:
        torrent = bencodepy.decode(data)
    except bencodepy.DecodingError as e:
        raise InvalidTorrentFileError(f"Invalid bencode format: {e}")

    if not isinstance(torrent, Mapping):
        raise InvalidTorrentFileError("Torrent data is not a dictionary")
    return torrent


def _optional_text(torrent, key):
    value = lookup(torrent, key)
    return to_text(value) if is_text(value) else None


def _announce_list(torrent):
    tiers = get_list(torrent, "announce-list")
    if tiers is None:
        # announce/announce-list may be missing if metadata was fetched via ut_metadata
        announce = lookup(torrent, "announce")
        tiers = [[announce]] if is_text(announce) else []

    announce_list = []
    for tier in tiers:
        if is_text(tier):
            tier = [tier]
        elif not isinstance(tier, (list, tuple)):
            continue
        announce_list.append([to_text(url) for url in tier if is_text(url)])
    return announce_list


def _url_list(torrent):
    # BEP 19 web seeds; some clients set url-list to an empty string
    urls = lookup(torrent, "url-list")
    if is_text(urls):
        urls = [urls] if len(urls) > 0 else []
    elif not isinstance(urls, (list, tuple)):
        urls = []
    return [to_text(url) for url in urls if is_text(url)]


def decode(torrent):
    """
    Decode a torrent into Metadata.

    Args:
        torrent (bytes | dict): bencoded .torrent data or its parsed form.

    Returns:
        Metadata: the normalized torrent.

    Raises:
        MissingFieldError: a required field is missing.
        InvalidTorrentFileError: ``torrent`` is not a bencoded dictionary.
    """
    if isinstance(torrent, (bytes, bytearray)):
        torrent = parse(bytes(torrent))
    elif not isinstance(torrent, Mapping):
        raise InvalidTorrentFileError(f"Cannot decode torrent from {type(torrent).__name__}")

    validate(torrent)

    info = copy_value(get_dict(torrent, "info"))
    name = to_text(get_bytes(info, "name"))

    encoding = get_bytes(torrent, "encoding")
    encoding = to_text(encoding) if encoding is not None else Config.DEFAULT_ENCODING

    created = get_int(torrent, "creation date")
    if created is not None:
        try:
            created = datetime.fromtimestamp(created, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning(f"Ignoring out of range creation date: {created}")
            created = None

    announce_list = _announce_list(torrent)
    layout = build_layout(info, name)

    metadata = Metadata(
        info,
        name=name,
        private=bool(get_int(info, "private")),
        publisher=_optional_text(torrent, "publisher"),
        publisher_url=_optional_text(torrent, "publisher-url"),
        creator=_optional_text(torrent, "created by"),
        created=created,
        encoding=encoding,
        comment=_optional_text(torrent, "comment"),
        announce_list=announce_list,
        announce=[url for tier in announce_list for url in tier],
        url_list=_url_list(torrent),
        files=layout.files,
        length=layout.length,
        piece_length=layout.piece_length,
        last_piece_length=layout.last_piece_length,
        pieces=split_pieces(get_bytes(info, "pieces"), encoding),
    )

    logger.debug(
        f"Decoded torrent {metadata.info_hash}: {name} "
        f"({len(metadata.files)} files, {metadata.length} bytes, {len(metadata.pieces)} pieces)"
    )
    return metadata


def decode_file(torrent_path):
    """Read and decode a .torrent file from disk."""
    try:
        with open(torrent_path, 'rb') as f:
            file_content = f.read()
    except FileNotFoundError:
        raise TorrentFileError(f"Torrent file not found: {torrent_path}")
    except PermissionError:
        raise TorrentFileError(f"Permission denied reading torrent file: {torrent_path}")
    except OSError as e:
        raise TorrentFileError(f"Failed to read torrent file: {e}")

    return decode(file_content)
