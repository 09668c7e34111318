"""
Checked access to raw bencoded values.

bencodepy hands back dictionaries keyed by bytes, while hand-built torrents
usually use str keys. Every accessor here accepts either spelling and only
returns a value when it is present with the expected type, so an empty but
present byte-string is never confused with a missing one.
"""

from collections.abc import Mapping
from types import MappingProxyType


def _spellings(key):
    return (key.encode("utf-8"), key)


def has_key(mapping, key):
    if not isinstance(mapping, Mapping):
        return False
    return any(k in mapping for k in _spellings(key))


def lookup(mapping, key):
    """Return the value stored under ``key`` in either spelling, or None."""
    if not isinstance(mapping, Mapping):
        return None
    for k in _spellings(key):
        if k in mapping:
            return mapping[k]
    return None


def key_for(mapping, key):
    """Return the spelling of ``key`` that matches the keys of ``mapping``."""
    raw, text = _spellings(key)
    if raw in mapping:
        return raw
    if text in mapping:
        return text
    if mapping and all(isinstance(k, str) for k in mapping):
        return text
    return raw


def get_bytes(mapping, key):
    value = lookup(mapping, key)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        # bencodepy encodes str values as UTF-8
        return value.encode("utf-8")
    return None


def get_int(mapping, key):
    value = lookup(mapping, key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def get_list(mapping, key):
    value = lookup(mapping, key)
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def get_dict(mapping, key):
    value = lookup(mapping, key)
    if isinstance(value, Mapping):
        return value
    return None


def is_text(value):
    return isinstance(value, (bytes, bytearray, str))


def to_text(value, encoding="utf-8"):
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(encoding, errors="replace")
    return str(value)


def to_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def copy_value(value):
    """Deep-copy a bencoded value into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [copy_value(v) for v in value]
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def freeze(value):
    """Read-only view of a bencoded value: mappingproxies and tuples all the way down."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value
