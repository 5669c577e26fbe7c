"""
LINE bot client command line tool.

Runs single LINE Messaging API calls using credentials from TOML configuration.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, List, Optional

import lib.utils as utils
from internal.config.manager import ConfigManager
from lib.line_bot import LineBotClient, LineBotError
from lib.line_bot.file_utils import readFileAsync
from lib.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO)
# set higher logging level for httpx to avoid all GET and POST requests being logged
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

SECRET_KEYS = ("access-token", "channel-secret")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="LINE Messaging API command line client, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration (secrets masked) and exit, dood!",
    )

    subparsers = parser.add_subparsers(dest="command")

    pushText = subparsers.add_parser("push-text", help="Push text message to user, group or room")
    pushText.add_argument("to", help="User, group or room ID")
    pushText.add_argument("text", help="Message text")

    multicastText = subparsers.add_parser("multicast-text", help="Send text message to several users")
    multicastText.add_argument("text", help="Message text")
    multicastText.add_argument("--to", action="append", required=True, help="User ID (can be specified multiple times)")

    profile = subparsers.add_parser("profile", help="Show user profile")
    profile.add_argument("userId", help="User ID")

    groupMembers = subparsers.add_parser("group-members", help="List all group member IDs")
    groupMembers.add_argument("groupId", help="Group ID")

    roomMembers = subparsers.add_parser("room-members", help="List all room member IDs")
    roomMembers.add_argument("roomId", help="Room ID")

    subparsers.add_parser("rich-menus", help="List rich menus")

    uploadImage = subparsers.add_parser("upload-rich-menu-image", help="Upload JPEG or PNG image for rich menu")
    uploadImage.add_argument("richMenuId", help="Rich menu ID")
    uploadImage.add_argument("path", help="Path to image file")

    args = parser.parse_args(argv)
    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dir_path) for dir_path in args.config_dir]

    if args.command is None and not args.print_config:
        parser.error("command is required")

    return args


def toJsonable(result: Any) -> Any:
    """Convert client results (models, lists of models, bytes) to JSON-friendly values."""
    if hasattr(result, "to_dict"):
        return result.to_dict(recursive=True)
    if isinstance(result, list):
        return [toJsonable(v) for v in result]
    if isinstance(result, bytes):
        return {"size": len(result)}
    return result


async def runCommand(client: LineBotClient, args: argparse.Namespace) -> Any:
    """Run single CLI command with given client and return its result."""
    match args.command:
        case "push-text":
            return await client.pushText(args.to, args.text)
        case "multicast-text":
            return await client.multicastText(args.to, args.text)
        case "profile":
            return await client.getUserProfile(args.userId)
        case "group-members":
            return await client.getAllGroupMemberIds(args.groupId)
        case "room-members":
            return await client.getAllRoomMemberIds(args.roomId)
        case "rich-menus":
            return await client.getRichMenuList()
        case "upload-rich-menu-image":
            image = await readFileAsync(args.path)
            return await client.uploadRichMenuImage(args.richMenuId, image)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


async def _run(configManager: ConfigManager, args: argparse.Namespace) -> Any:
    async with LineBotClient.fromConfig(configManager.getClientConfig()) as client:
        return await runCommand(client, args)


def prettyPrintConfig(configManager: ConfigManager) -> None:
    """Pretty-print the loaded configuration, dood!"""
    config = dict(configManager.config)
    lineConfig = dict(config.get("line", {}))
    for key in SECRET_KEYS:
        if key in lineConfig:
            lineConfig[key] = utils.maskSecret(lineConfig[key])
    config["line"] = lineConfig

    print("=== LINE Client Configuration ===")
    print(utils.jsonDumps(config, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        configManager = ConfigManager(args.config, args.config_dir)
        initLogging(configManager.getLoggingConfig())

        if args.print_config:
            prettyPrintConfig(configManager)
            return 0

        result = asyncio.run(_run(configManager, args))
    except LineBotError as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        return 1

    print(utils.jsonDumps(toJsonable(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
