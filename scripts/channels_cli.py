#!/usr/bin/env python3
"""Channel registry and SuiNS CLI.

Usage:
    uv run python scripts/channels_cli.py list
    uv run python scripts/channels_cli.py register general 0xchannel1
    uv run python scripts/channels_cli.py resolve '#general' random 0xabc
    uv run python scripts/channels_cli.py reverse 0xchannel1
    uv run python scripts/channels_cli.py export > channels.json
    uv run python scripts/channels_cli.py import channels.json --replace
    uv run python scripts/channels_cli.py resolve-account alice.sui
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx
import structlog
from dotenv import load_dotenv

logger = structlog.get_logger()


def configure_logging() -> None:
    # Logs go to stderr so command output stays pipeable
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def _registry(args: argparse.Namespace):
    from messaging_names.resolution import create_channel_registry

    return create_channel_registry(storage_dir=args.storage_dir, storage_key=args.storage_key)


def cmd_list(args: argparse.Namespace) -> None:
    """List registered channel names."""
    registry = _registry(args)
    channels = asyncio.run(registry.list())

    if not channels:
        print("No channels registered")
        return

    print(f"Registered channels ({len(channels)} total):\n")
    for name, channel_id in channels.items():
        print(f"  {name}: {channel_id}")


def cmd_register(args: argparse.Namespace) -> None:
    registry = _registry(args)
    asyncio.run(registry.register(args.name, args.channel_id))
    print(f"Registered {args.name} -> {args.channel_id}")


def cmd_unregister(args: argparse.Namespace) -> None:
    registry = _registry(args)
    asyncio.run(registry.unregister(args.name))
    print(f"Unregistered {args.name}")


def cmd_resolve(args: argparse.Namespace) -> None:
    """Resolve channel names (or pass IDs through)."""
    registry = _registry(args)
    resolved = asyncio.run(registry.resolve_many(args.names))
    for name, channel_id in zip(args.names, resolved):
        print(f"{name}\t{channel_id}")


def cmd_reverse(args: argparse.Namespace) -> None:
    registry = _registry(args)
    name = asyncio.run(registry.reverse_lookup(args.channel_id))
    print(name or f"No name registered for {args.channel_id}")


def cmd_export(args: argparse.Namespace) -> None:
    registry = _registry(args)
    print(json.dumps(registry.export(), indent=2))


def cmd_import(args: argparse.Namespace) -> None:
    """Import an exported snapshot file and save it."""
    from messaging_names.storage import decode_snapshot

    data = decode_snapshot(Path(args.file).read_bytes())
    registry = _registry(args)
    registry.import_(data, merge=not args.replace)
    registry.save()
    print(f"Imported {len(data)} channels ({registry.size} registered)")


def cmd_clear(args: argparse.Namespace) -> None:
    registry = _registry(args)

    if not args.force:
        print(f"About to remove {registry.size} channel registrations")
        confirm = input("Are you sure? [y/N] ")
        if confirm.lower() != "y":
            print("Cancelled.")
            return

    count = registry.size
    registry.clear()
    registry.save()
    print(f"Cleared {count} channels")


async def _resolve_accounts(names: list[str]) -> list[str]:
    from messaging_names.resolution import SuiNSResolver
    from messaging_names.suins import SuinsClient

    async with SuinsClient() as client:
        return await SuiNSResolver(client).resolve_many(names)


def cmd_resolve_account(args: argparse.Namespace) -> None:
    """Resolve SuiNS names (or pass addresses through)."""
    resolved = asyncio.run(_resolve_accounts(args.names))
    for name, address in zip(args.names, resolved):
        print(f"{name}\t{address}")


async def _account_names(address: str) -> list[str]:
    from messaging_names.suins import SuinsClient

    async with SuinsClient() as client:
        return await client.get_names(address)


def cmd_reverse_account(args: argparse.Namespace) -> None:
    names = asyncio.run(_account_names(args.address))
    if not names:
        print(f"No SuiNS names for {args.address}")
        return
    for name in names:
        print(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Channel registry and SuiNS CLI")
    parser.add_argument(
        "--storage-dir",
        default=None,
        help="Registry directory (default: CHANNEL_REGISTRY_DIR or data/channels)",
    )
    parser.add_argument(
        "--storage-key",
        default=None,
        help="Registry storage key (default: CHANNEL_REGISTRY_STORAGE_KEY)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List registered channels")
    list_parser.set_defaults(func=cmd_list)

    register_parser = subparsers.add_parser("register", help="Register a channel name")
    register_parser.add_argument("name", help="Channel name, with or without #")
    register_parser.add_argument("channel_id", help="Channel object ID (0x...)")
    register_parser.set_defaults(func=cmd_register)

    unregister_parser = subparsers.add_parser("unregister", help="Remove a channel name")
    unregister_parser.add_argument("name")
    unregister_parser.set_defaults(func=cmd_unregister)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve channel names to IDs")
    resolve_parser.add_argument("names", nargs="+")
    resolve_parser.set_defaults(func=cmd_resolve)

    reverse_parser = subparsers.add_parser("reverse", help="Look up the name of a channel ID")
    reverse_parser.add_argument("channel_id")
    reverse_parser.set_defaults(func=cmd_reverse)

    export_parser = subparsers.add_parser("export", help="Print the registry as JSON")
    export_parser.set_defaults(func=cmd_export)

    import_parser = subparsers.add_parser("import", help="Import a JSON snapshot")
    import_parser.add_argument("file", help="Path to an exported snapshot")
    import_parser.add_argument(
        "--replace",
        action="store_true",
        help="Replace existing registrations instead of merging",
    )
    import_parser.set_defaults(func=cmd_import)

    clear_parser = subparsers.add_parser("clear", help="Remove all registrations")
    clear_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Skip confirmation",
    )
    clear_parser.set_defaults(func=cmd_clear)

    account_parser = subparsers.add_parser("resolve-account", help="Resolve SuiNS names to addresses")
    account_parser.add_argument("names", nargs="+")
    account_parser.set_defaults(func=cmd_resolve_account)

    reverse_account_parser = subparsers.add_parser(
        "reverse-account", help="List SuiNS names pointing at an address"
    )
    reverse_account_parser.add_argument("address")
    reverse_account_parser.set_defaults(func=cmd_reverse_account)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    load_dotenv()
    configure_logging()

    from messaging_names.resolution import ResolutionError
    from messaging_names.storage import SnapshotError
    from messaging_names.suins import SuinsRpcError

    try:
        args.func(args)
    except (ResolutionError, SnapshotError, SuinsRpcError, httpx.HTTPError, OSError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
