#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from app.shared_edits import MetadataApiClient, SharedEditsError, SharedSavedEdits, sha1_hex_digest
from metadata.types import SAVED_EDIT_FIELDS


def _build_store(args: argparse.Namespace) -> SharedSavedEdits:
    client = MetadataApiClient(base_url=args.base_url, timeout_seconds=args.timeout)
    return SharedSavedEdits(client, platform=args.platform)


def _cmd_check(store: SharedSavedEdits, args: argparse.Namespace) -> int:
    known = store.is_known(args.identifier)
    print(f"id={args.identifier!r} sha1={sha1_hex_digest(args.identifier)} known={known}")
    return 0 if known else 2


def _cmd_fetch(store: SharedSavedEdits, args: argparse.Namespace) -> int:
    record = store.fetch_record(args.identifier)
    if record is None:
        print(f"id={args.identifier!r} not known to the shared library")
        return 2
    print(json.dumps(record, indent=2, ensure_ascii=False))
    return 0


def _cmd_submit(store: SharedSavedEdits, args: argparse.Namespace) -> int:
    record = {key: getattr(args, name) for key, name in SAVED_EDIT_FIELDS.items() if getattr(args, name)}
    if not record:
        print("Nothing to submit: pass at least one of --track, --artist, --album, --album-artist")
        return 1
    accepted = store.put_record(args.identifier, record)
    print(f"id={args.identifier!r} accepted={accepted}")
    return 0 if accepted else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query or contribute to the shared saved edits library.")
    parser.add_argument("--base-url", default=None, help="Override SHARED_EDITS_BASE_URL.")
    parser.add_argument("--platform", default=None, help="Video platform, e.g. youtube.")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP traffic.")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Anonymously check whether a video is known.")
    check.add_argument("identifier")
    check.set_defaults(handler=_cmd_check)

    fetch = sub.add_parser("fetch", help="Fetch the shared record of a known video.")
    fetch.add_argument("identifier")
    fetch.set_defaults(handler=_cmd_fetch)

    submit = sub.add_parser("submit", help="Submit an edit for a video.")
    submit.add_argument("identifier")
    submit.add_argument("--track", dest="track")
    submit.add_argument("--artist", dest="artist")
    submit.add_argument("--album", dest="album")
    submit.add_argument("--album-artist", dest="album_artist")
    submit.set_defaults(handler=_cmd_submit)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    store = _build_store(args)
    try:
        return args.handler(store, args)
    except SharedEditsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        store.client.close()


if __name__ == "__main__":
    raise SystemExit(main())
