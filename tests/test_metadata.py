import json
from urllib.parse import unquote

from parse_torrent_file import decode
from parse_torrent_file.metadata import Metadata

from conftest import make_torrent


def test_magnet_uri(torrent_bytes):
    metadata = decode(torrent_bytes)
    magnet_uri = metadata.magnet_uri()

    assert magnet_uri.startswith(f"magnet:?xt=urn:btih:{metadata.info_hash}")
    magnet_uri = unquote(magnet_uri)
    assert "dn=album" in magnet_uri
    assert "tr=http://tracker.example/announce" in magnet_uri
    assert "tr=udp://tracker.example:6969" in magnet_uri
    assert "ws=http://seed.example/album/" in magnet_uri
    assert magnet_uri.endswith("xl=120")


def test_magnet_uri_without_trackers(single_file_info):
    metadata = decode(make_torrent(single_file_info))
    assert metadata.magnet_uri() == f"magnet:?xt=urn:btih:{metadata.info_hash}&dn=a.txt&xl=100"


def test_to_dict_is_json_serializable(torrent_bytes):
    data = json.loads(json.dumps(decode(torrent_bytes).to_dict()))
    assert data["name"] == "album"
    assert data["created"] == "2023-11-14T22:13:20+00:00"
    assert data["files"][1] == {"path": "album/02.flac", "name": "02.flac", "length": 70, "offset": 50}


def test_constructed_metadata_hashes_its_info(single_file_info):
    metadata = Metadata(single_file_info)
    assert metadata.info_hash == decode(make_torrent(single_file_info)).info_hash
    assert metadata.encoding == "UTF-8"
    assert metadata.private is False
