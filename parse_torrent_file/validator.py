"""
Required-field checks shared by decoding and encoding.
"""

from .errors import MissingFieldError
from .fields import get_bytes, get_dict, get_int, get_list, has_key


def ensure(condition, field_name):
    if not condition:
        raise MissingFieldError(field_name)


def validate(torrent):
    """
    Check that a raw torrent dictionary carries every required field.

    Raises MissingFieldError naming the first field that is absent or has
    the wrong type. Runs before any derived value is computed, for both
    decoding and encoding.
    """
    info = get_dict(torrent, "info")
    ensure(info is not None, "info")

    name = get_bytes(info, "name")
    ensure(name is not None and len(name) > 0, "info.name")

    piece_length = get_int(info, "piece length")
    ensure(piece_length is not None and piece_length > 0, "info['piece length']")

    ensure(get_bytes(info, "pieces") is not None, "info.pieces")

    if has_key(info, "files"):
        files = get_list(info, "files")
        ensure(files is not None, "info.files")
        for i, entry in enumerate(files):
            ensure(get_int(entry, "length") is not None, f"info.files[{i}].length")
            path = get_list(entry, "path")
            ensure(path is not None and len(path) > 0, f"info.files[{i}].path")
    else:
        ensure(get_int(info, "length") is not None, "info.length")
