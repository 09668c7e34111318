"""
File layout of a torrent: where each file sits in the virtual stream made by
concatenating all files, and how long the final piece is.
"""

import posixpath
from dataclasses import dataclass

from .errors import MissingFieldError
from .fields import get_int, get_list, has_key, is_text, lookup, to_text
from .metadata import FileEntry


@dataclass(frozen=True)
class FileLayout:
    files: list
    length: int
    last_piece_length: int
    piece_length: int


def join_path(parts):
    """Join path components POSIX-style, without a leading separator.

    '.' and '..' components are collapsed and can never climb above the
    torrent root.
    """
    return posixpath.normpath(posixpath.join("/", *parts)).lstrip("/")


def last_piece_length(files, piece_length):
    end = files[-1].offset + files[-1].length if files else 0
    return end % piece_length or piece_length


def build_layout(info, name):
    piece_length = get_int(info, "piece length")
    if piece_length is None or piece_length <= 0:
        raise MissingFieldError("info['piece length']")

    files = []
    offset = 0
    if has_key(info, "files"):
        for i, entry in enumerate(get_list(info, "files") or []):
            length = get_int(entry, "length")
            if length is None:
                raise MissingFieldError(f"info.files[{i}].length")
            entry_name = lookup(entry, "name")
            parts = [to_text(entry_name) if is_text(entry_name) and entry_name else name]
            parts.extend(to_text(part) for part in get_list(entry, "path") or [])
            files.append(FileEntry(path=join_path(parts), name=parts[-1], length=length, offset=offset))
            offset += length
    else:
        length = get_int(info, "length")
        if length is None:
            raise MissingFieldError("info.length")
        files.append(FileEntry(path=join_path([name]), name=name, length=length, offset=0))
        offset = length

    return FileLayout(
        files=files,
        length=offset,
        last_piece_length=last_piece_length(files, piece_length),
        piece_length=piece_length,
    )
