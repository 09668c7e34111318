import json

import pytest

from parse_torrent_file import decode_file
from parse_torrent_file.cli import format_bytes, main


def test_format_bytes():
    assert format_bytes(None) == "N/A"
    assert format_bytes(100) == "100.00 B"
    assert format_bytes(262144) == "256.00 KB"


def test_info(torrent_path, capsys):
    main(["info", str(torrent_path)])
    out = capsys.readouterr().out
    assert "Name:         album" in out
    assert decode_file(torrent_path).info_hash in out
    assert "album/disc1/01.flac" in out
    assert "[1] udp://tracker.example:6969" in out


def test_info_json(torrent_path, capsys):
    main(["info", str(torrent_path), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["length"] == 120
    assert data["last_piece_length"] == 56


def test_magnet(torrent_path, capsys):
    main(["magnet", str(torrent_path)])
    assert capsys.readouterr().out.startswith("magnet:?xt=urn:btih:")


def test_rewrite(torrent_path, tmp_path, capsys):
    output = tmp_path / "rewritten.torrent"
    main(["rewrite", str(torrent_path), str(output), "--comment", "mirror", "--tracker", "http://new/announce"])

    original = decode_file(torrent_path)
    rewritten = decode_file(output)
    assert rewritten.info_hash == original.info_hash
    assert rewritten.comment == "mirror"
    assert rewritten.announce_list == [["http://new/announce"]]
    assert str(output) in capsys.readouterr().out


def test_rewrite_private(torrent_path, tmp_path, capsys):
    output = tmp_path / "private.torrent"
    main(["rewrite", str(torrent_path), str(output), "--private"])

    rewritten = decode_file(output)
    assert rewritten.private is True
    out = capsys.readouterr().out
    assert f"({rewritten.info_hash})" in out
    assert decode_file(torrent_path).info_hash not in out


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["info", str(tmp_path / "missing.torrent")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_no_command(capsys):
    with pytest.raises(SystemExit):
        main([])
