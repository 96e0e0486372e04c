"""Command line entry point: ``python -m websets_mcp``."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from websets_mcp.config import WebsetsConfig, _parse_enabled_tools
from websets_mcp.server import configure_logging, create_app

logger = logging.getLogger("websets_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="websets-mcp", description="Serve Exa Websets tools over HTTP.")
    parser.add_argument(
        "--tools",
        default=None,
        help="Comma separated tool names to activate (default: all, or WEBSETS_ENABLED_TOOLS)",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--api-key", default=None, help="Exa API key (default: EXA_API_KEY)")
    return parser


def config_from_args(args: argparse.Namespace) -> WebsetsConfig:
    config = WebsetsConfig(api_key=args.api_key)
    if args.tools is not None:
        config.enabled_tools = _parse_enabled_tools(args.tools)
    return config


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    configure_logging(config)
    logger.info("starting websets mcp server host=%s port=%s", args.host, args.port)
    uvicorn.run(create_app(config), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
