"""
Splitting and joining the concatenated SHA-1 piece hashes of a torrent.

The pieces buffer is reinterpreted through the torrent's declared text
encoding before it is cut into 20-character strides, as historical clients
do. Only byte-preserving encodings such as latin-1 give exact hashes; under
UTF-8 any hash byte outside ASCII comes back as U+FFFD (``efbfbd``).
"""

import codecs
import re

from .logger import logger


PIECE_HASH_LENGTH = 20


def normalize_encoding(encoding):
    """'UTF-8' -> 'utf8', 'ISO_8859-1' -> 'iso88591'."""
    return re.sub(r"[^a-z0-9]", "", encoding.lower())


def _lookup_codec(encoding):
    name = normalize_encoding(encoding)
    try:
        info = codecs.lookup(name)
    except LookupError:
        return None
    # hex, base64, rot13 and friends are registered codecs but not text encodings
    if not getattr(info, "_is_text_encoding", True):
        return None
    return name


def _split_raw(buffer):
    return [buffer[i:i + PIECE_HASH_LENGTH] for i in range(0, len(buffer), PIECE_HASH_LENGTH)]


def _split_text(buffer, codec):
    text = buffer.decode(codec, errors="replace")
    strides = [
        text[i:i + PIECE_HASH_LENGTH].encode(codec, errors="replace")
        for i in range(0, len(text), PIECE_HASH_LENGTH)
    ]
    return strides, len(text)


def split_pieces(buffer, encoding="UTF-8"):
    """Return the piece hashes in ``buffer`` as lowercase hex strings."""
    codec = _lookup_codec(encoding)
    strides = None
    if codec is None:
        logger.warning(f"Unknown torrent encoding {encoding!r}, splitting raw piece bytes")
    else:
        try:
            strides, total = _split_text(buffer, codec)
        except (LookupError, UnicodeError) as e:
            logger.warning(f"Cannot read pieces through encoding {encoding!r} ({e}), splitting raw piece bytes")

    if strides is None:
        strides, total = _split_raw(buffer), len(buffer)

    if total % PIECE_HASH_LENGTH:
        logger.warning(
            f"Pieces buffer is not a multiple of {PIECE_HASH_LENGTH} "
            f"({total} units), last hash is truncated"
        )

    return [stride.hex() for stride in strides]


def join_pieces(hashes):
    """Concatenate hex piece hashes back into a raw pieces buffer."""
    return b"".join(bytes.fromhex(piece) for piece in hashes)
