"""Command-line interface for the Mux API client.

WHY: Operators often need a quick look at a live stream or asset, or a
one-off action (signal complete, reset a stream key, sign a playback
token) without writing a script.

HOW: argparse subcommands map one-to-one onto client methods. The async
call runs via asyncio.run(). The JSON result goes to stdout so it can be
piped into jq; a short human summary and errors go to stderr.

RULES:
- Credentials come from MUX_TOKEN_ID / MUX_TOKEN_SECRET (or .env)
- stdout carries only the JSON result
- Exit code 1 on API, validation, or network errors
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional

import httpx

from mux_client.api.client import MuxAPIError
from mux_client.api.models import Asset, LiveStream
from mux_client.mux import Mux

LIVE_STREAM_ACTIONS = {
    "get": "get",
    "delete": "delete",
    "complete": "signal_complete",
    "reset-key": "reset_stream_key",
    "enable": "enable",
    "disable": "disable",
}


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _page_params(args: argparse.Namespace) -> dict:
    return {"limit": args.limit, "page": args.page}


def _summarize(group: str, result: Any) -> None:
    """Print one summary line per live stream or asset to stderr."""
    if not result:
        return
    items = result if isinstance(result, list) else [result]
    for item in items:
        if not isinstance(item, dict) or "id" not in item:
            continue
        if group == "live-streams":
            stream = LiveStream.from_dict(item)
            playback = ", ".join(p.id for p in stream.playback_ids) or "-"
            _status("{}  {}  playback: {}  simulcast targets: {}".format(
                stream.id, stream.status or "?", playback, len(stream.simulcast_targets),
            ))
        elif group == "assets":
            asset = Asset.from_dict(item)
            duration = "{:.1f}s".format(asset.duration) if asset.duration else "-"
            _status("{}  {}  {}".format(asset.id, asset.status or "?", duration))


async def _dispatch(mux: Mux, args: argparse.Namespace) -> Any:
    if args.group == "live-streams":
        live_streams = mux.video.live_streams
        if args.action == "list":
            return await live_streams.list(_page_params(args))
        if args.action == "create":
            params: dict = {"playback_policy": [args.playback_policy]}
            if args.new_asset:
                params["new_asset_settings"] = {"playback_policy": [args.playback_policy]}
            if args.passthrough:
                params["passthrough"] = args.passthrough
            if args.latency_mode:
                params["latency_mode"] = args.latency_mode
            return await live_streams.create(params)
        method = getattr(live_streams, LIVE_STREAM_ACTIONS[args.action])
        return await method(args.live_stream_id)

    if args.group == "assets":
        assets = mux.video.assets
        if args.action == "list":
            return await assets.list(_page_params(args))
        if args.action == "get":
            return await assets.get(args.asset_id)
        return await assets.delete(args.asset_id)

    return await mux.video.playback_ids.get(args.playback_id)


async def _run(args: argparse.Namespace) -> None:
    async with Mux(base_url=args.base_url) as mux:
        result = await _dispatch(mux, args)
    _summarize(args.group, result)
    if result is not None:
        print(json.dumps(result, indent=2))
    else:
        _status("Done.")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - live-streams list|create|get|delete|complete|reset-key|enable|disable
    - assets list|get|delete
    - playback-ids get
    - sign-playback-id (local, no API call)
    """
    parser = argparse.ArgumentParser(
        prog="mux_client",
        description="Call the Mux Video API from the command line.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Override the API base URL (default: MUX_BASE_URL or https://api.mux.com).",
    )
    groups = parser.add_subparsers(dest="group", required=True)

    # live-streams
    live = groups.add_parser("live-streams", help="Manage live streams.")
    live_actions = live.add_subparsers(dest="action", required=True)

    live_list = live_actions.add_parser("list", help="List live streams.")
    live_list.add_argument("--limit", type=int, default=25)
    live_list.add_argument("--page", type=int, default=1)

    live_create = live_actions.add_parser("create", help="Create a live stream.")
    live_create.add_argument(
        "--playback-policy",
        choices=["public", "signed"],
        default="public",
        help="Playback policy (default: %(default)s).",
    )
    live_create.add_argument(
        "--new-asset",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Record broadcasts into assets (default: %(default)s).",
    )
    live_create.add_argument("--passthrough", default=None)
    live_create.add_argument("--latency-mode", choices=["standard", "reduced", "low"], default=None)

    for action in LIVE_STREAM_ACTIONS:
        sub = live_actions.add_parser(action)
        sub.add_argument("live_stream_id")

    # assets
    assets = groups.add_parser("assets", help="Inspect and delete assets.")
    asset_actions = assets.add_subparsers(dest="action", required=True)
    asset_list = asset_actions.add_parser("list", help="List assets.")
    asset_list.add_argument("--limit", type=int, default=25)
    asset_list.add_argument("--page", type=int, default=1)
    for action in ("get", "delete"):
        asset_actions.add_parser(action).add_argument("asset_id")

    # playback-ids
    playback = groups.add_parser("playback-ids", help="Look up playback IDs.")
    playback_actions = playback.add_subparsers(dest="action", required=True)
    playback_actions.add_parser("get").add_argument("playback_id")

    # sign-playback-id
    sign = groups.add_parser(
        "sign-playback-id",
        help="Sign a playback token using MUX_SIGNING_KEY / MUX_PRIVATE_KEY.",
    )
    sign.add_argument("playback_id")
    sign.add_argument(
        "--type",
        choices=["video", "thumbnail", "gif", "storyboard"],
        default="video",
    )
    sign.add_argument(
        "--expiration",
        default="7d",
        help="Token lifetime, e.g. 3600, 15m, 12h, 7d (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m mux_client``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.group == "sign-playback-id":
            print(Mux.jwt.sign_playback_id(
                args.playback_id,
                type=args.type,
                expiration=args.expiration,
            ))
            return
        asyncio.run(_run(args))
    except (MuxAPIError, ValueError, httpx.HTTPError) as exc:
        print("Error: {}".format(exc), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
