"""
parse-torrent-file - Convert between bencoded .torrent files and Metadata.

decode() turns torrent bytes into a normalized Metadata value exposing the
info hash, piece hashes, file layout, trackers and web seeds. encode() turns
Metadata back into bencode without disturbing the info hash.
"""

from .decoder import decode, decode_file
from .encoder import encode, encode_file
from .errors import InvalidTorrentFileError, MissingFieldError, TorrentFileError
from .metadata import FileEntry, Metadata
from .validator import validate

__version__ = "0.1.0"
__all__ = [
    "decode",
    "decode_file",
    "encode",
    "encode_file",
    "validate",
    "Metadata",
    "FileEntry",
    "TorrentFileError",
    "MissingFieldError",
    "InvalidTorrentFileError",
]
