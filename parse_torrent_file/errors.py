"""
Exceptions raised while converting torrent metadata.

- TorrentFileError: Base exception for all torrent file errors
- MissingFieldError: Raised when a required field is missing or mistyped
- InvalidTorrentFileError: Raised when the input is not a bencoded dictionary
"""


class TorrentFileError(Exception):
    """Base exception for torrent file errors."""
    pass


class MissingFieldError(TorrentFileError):
    """Raised when torrent metadata is missing a required field.

    ``path`` names the field in dotted/bracket notation, e.g.
    ``info.files[0].length``.
    """

    def __init__(self, path):
        self.path = path
        super().__init__(f"Torrent is missing required field: {path}")


class InvalidTorrentFileError(TorrentFileError):
    """Raised when torrent data is not valid bencode or not a dictionary."""
    pass
