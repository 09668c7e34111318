"""
Command-line interface for parse-torrent-file.

Usage:
    parse-torrent-file info <file> [--json]
    parse-torrent-file magnet <file>
    parse-torrent-file rewrite <file> <output> [--comment TEXT] [--private | --public] [--tracker URL ...]
"""

import argparse
import json
import sys

from .decoder import decode, decode_file
from .encoder import encode_file
from .errors import TorrentFileError
from .logger import logger


def format_bytes(size):
    """Format bytes as human-readable string."""
    if size is None:
        return "N/A"
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} PB"


def show_info(args):
    metadata = decode_file(args.file)

    if args.json:
        print(json.dumps(metadata.to_dict(), indent=2))
        return

    print(f"Name:         {metadata.name}")
    print(f"Info hash:    {metadata.info_hash}")
    print(f"Size:         {format_bytes(metadata.length)} ({metadata.length} bytes)")
    print(f"Pieces:       {len(metadata.pieces)} x {format_bytes(metadata.piece_length)}"
          f" (last {format_bytes(metadata.last_piece_length)})")
    print(f"Private:      {'yes' if metadata.private else 'no'}")
    if metadata.created:
        print(f"Created:      {metadata.created.isoformat()}")
    if metadata.creator:
        print(f"Created by:   {metadata.creator}")
    if metadata.comment:
        print(f"Comment:      {metadata.comment}")

    if metadata.announce_list:
        print("\nTrackers:")
        for i, tier in enumerate(metadata.announce_list):
            for url in tier:
                print(f"  [{i}] {url}")

    if metadata.url_list:
        print("\nWeb seeds:")
        for url in metadata.url_list:
            print(f"  {url}")

    print(f"\nFiles ({len(metadata.files)}):")
    for f in metadata.files:
        print(f"  {f.path}  {format_bytes(f.length)}  @ {f.offset}")


def show_magnet(args):
    metadata = decode_file(args.file)
    print(metadata.magnet_uri())


def rewrite(args):
    metadata = decode_file(args.file)

    if args.comment is not None:
        metadata.comment = args.comment
    if args.private is not None:
        metadata.private = args.private
    if args.tracker:
        metadata.announce_list = [[url] for url in args.tracker]
        metadata.announce = list(args.tracker)

    data = encode_file(metadata, args.output)
    # private/public edits change the info hash of the written file
    print(f"Wrote {args.output} ({decode(data).info_hash})")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Inspect and rewrite .torrent files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s info debian.iso.torrent
  %(prog)s info debian.iso.torrent --json
  %(prog)s magnet debian.iso.torrent
  %(prog)s rewrite in.torrent out.torrent --comment "mirror" --tracker http://tracker/announce
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    info_parser = subparsers.add_parser("info", help="Show torrent metadata")
    info_parser.add_argument("file", help="Path to .torrent file")
    info_parser.add_argument("--json", action="store_true", help="Output as JSON")

    magnet_parser = subparsers.add_parser("magnet", help="Print the magnet link")
    magnet_parser.add_argument("file", help="Path to .torrent file")

    rewrite_parser = subparsers.add_parser("rewrite", help="Edit top-level fields and re-encode")
    rewrite_parser.add_argument("file", help="Path to .torrent file")
    rewrite_parser.add_argument("output", help="Path of the .torrent file to write")
    rewrite_parser.add_argument("--comment", help="Replace the comment")
    rewrite_parser.add_argument("--tracker", action="append", help="Replace trackers (one tier per URL)")
    privacy = rewrite_parser.add_mutually_exclusive_group()
    privacy.add_argument("--private", dest="private", action="store_true", default=None,
                         help="Mark the torrent private (changes the info hash)")
    privacy.add_argument("--public", dest="private", action="store_false",
                         help="Mark the torrent public (changes the info hash)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    commands = {
        "info": show_info,
        "magnet": show_magnet,
        "rewrite": rewrite,
    }

    try:
        commands[args.command](args)
    except TorrentFileError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
