"""
In-memory representation of a decoded torrent.

Metadata keeps the raw info dictionary exactly as it was validated and
hashed, next to the convenience fields derived from it. The info dictionary,
its bencoded form and the info hash are read-only: editing the derived
fields (files, pieces, length, ...) never changes what gets re-encoded, so
the info hash stays a faithful content identifier.
"""

import hashlib
from dataclasses import InitVar, asdict, dataclass, field
from datetime import datetime
from typing import List, Optional
from urllib.parse import quote

import bencodepy

from .config import Config
from .fields import freeze


@dataclass
class FileEntry:
    path: str
    name: str
    length: int
    offset: int


@dataclass
class Metadata:
    raw_info: InitVar[dict]
    name: str = ""
    private: bool = False
    publisher: Optional[str] = None
    publisher_url: Optional[str] = None
    creator: Optional[str] = None
    created: Optional[datetime] = None
    encoding: str = Config.DEFAULT_ENCODING
    comment: Optional[str] = None
    announce_list: List[List[str]] = field(default_factory=list)
    announce: List[str] = field(default_factory=list)
    url_list: List[str] = field(default_factory=list)
    files: List[FileEntry] = field(default_factory=list)
    length: int = 0
    piece_length: int = 0
    last_piece_length: int = 0
    pieces: List[str] = field(default_factory=list)

    def __post_init__(self, raw_info):
        self._info = freeze(raw_info)
        self._info_buffer = bencodepy.encode(raw_info)
        self._info_hash = hashlib.sha1(self._info_buffer).hexdigest()

    @property
    def info(self):
        """The retained info dictionary, read-only at every level."""
        return self._info

    @property
    def info_buffer(self):
        """The bencoded info dictionary that ``info_hash`` is computed over."""
        return self._info_buffer

    @property
    def info_hash(self):
        return self._info_hash

    def magnet_uri(self):
        """
        Build a magnet URI for this torrent.

        The xt parameter is built manually to avoid encoding colons in
        'urn:btih:' which breaks compatibility with many torrent clients.
        """
        parts = [f"xt=urn:btih:{self.info_hash}"]

        if self.name:
            parts.append(f"dn={quote(self.name, safe='')}")

        for tracker in self.announce:
            parts.append(f"tr={quote(tracker, safe='')}")

        for url in self.url_list:
            parts.append(f"ws={quote(url, safe='')}")

        if self.length:
            parts.append(f"xl={self.length}")

        return f"magnet:?{'&'.join(parts)}"

    def to_dict(self):
        """JSON-friendly summary of the convenience fields."""
        return {
            "info_hash": self.info_hash,
            "name": self.name,
            "private": self.private,
            "publisher": self.publisher,
            "publisher_url": self.publisher_url,
            "creator": self.creator,
            "created": self.created.isoformat() if self.created else None,
            "encoding": self.encoding,
            "comment": self.comment,
            "announce_list": self.announce_list,
            "announce": self.announce,
            "url_list": self.url_list,
            "files": [asdict(f) for f in self.files],
            "length": self.length,
            "piece_length": self.piece_length,
            "last_piece_length": self.last_piece_length,
            "pieces": self.pieces,
        }
