"""
Encoding of Metadata back into a bencoded torrent file.

The wire form is rebuilt from the retained info dictionary plus the
top-level fields of Metadata. Derived fields such as files, length and
pieces are ignored, so the info hash survives any edit to them.
"""

import hashlib
import math
import time
from datetime import datetime, timezone

import bencodepy

from .fields import get_int, has_key, key_for, to_bytes
from .logger import logger
from .validator import validate


def _info_with_private(metadata):
    # Rebuilt from the hashed bytes, so the written info always matches info_hash
    info = bencodepy.decode(metadata.info_buffer)
    if metadata.private is None:
        return info

    # Only touch the flag when it was present or has changed, otherwise
    # re-encoding would add 'private' and change the info hash
    retained = bool(get_int(info, "private"))
    if has_key(info, "private") or bool(metadata.private) != retained:
        info[key_for(info, "private")] = int(bool(metadata.private))
    return info


def encode(metadata, clock=time.time):
    """
    Encode Metadata into bencoded .torrent bytes.

    Args:
        metadata (Metadata): the torrent to encode. ``metadata.created`` is
            set from ``clock`` when it is None.
        clock (callable): returns the current time in epoch seconds.

    Returns:
        bytes: the bencoded torrent.

    Raises:
        MissingFieldError: the retained info dictionary lacks a required field.
    """
    validate({"info": metadata.info})

    info = _info_with_private(metadata)
    torrent = {b"info": info}

    if metadata.announce and metadata.announce[0]:
        torrent[b"announce"] = to_bytes(metadata.announce[0])

    if metadata.announce_list:
        tiers = [[to_bytes(url) for url in tier] for tier in metadata.announce_list]
        torrent[b"announce-list"] = tiers
        if b"announce" not in torrent:
            first = next((url for tier in tiers for url in tier), None)
            if first is not None:
                torrent[b"announce"] = first

    if metadata.comment is not None:
        torrent[b"comment"] = to_bytes(metadata.comment)
    if metadata.encoding is not None:
        torrent[b"encoding"] = to_bytes(metadata.encoding)
    if metadata.publisher is not None:
        torrent[b"publisher"] = to_bytes(metadata.publisher)
    if metadata.publisher_url is not None:
        torrent[b"publisher-url"] = to_bytes(metadata.publisher_url)
    if metadata.creator is not None:
        torrent[b"created by"] = to_bytes(metadata.creator)

    if metadata.url_list:
        torrent[b"url-list"] = [to_bytes(url) for url in metadata.url_list]

    if metadata.created is None:
        metadata.created = datetime.fromtimestamp(clock(), tz=timezone.utc)
    torrent[b"creation date"] = math.floor(metadata.created.timestamp())

    info_hash = hashlib.sha1(bencodepy.encode(info)).hexdigest()
    logger.debug(f"Encoding torrent {info_hash}: {metadata.name}")
    return bencodepy.encode(torrent)


def encode_file(metadata, torrent_path, clock=time.time):
    """Encode Metadata and write it to a .torrent file."""
    data = encode(metadata, clock=clock)
    with open(torrent_path, 'wb') as f:
        f.write(data)
    return data
