from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from .config import BUILTIN_THEMES, BootstrapSettings, load_settings
from .core.errors import BootstrapError
from .logging import configure_logging
from .resources import RESOURCES_RENDERER, HeaderResponse
from .server import run_local_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bootstrap theme command line interface.")
    parser.add_argument("--log-level", default=None, help="Override BOOTSTRAP_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the showcase server.")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    head_parser = subparsers.add_parser("head", help="Print the head references for the effective settings.")

    for sub in (serve_parser, head_parser):
        sub.add_argument("--theme", choices=sorted(BUILTIN_THEMES), default=None)
        sub.add_argument("--cdn", action="store_true", help="Reference CDN resources.")

    return parser


def effective_settings(args: argparse.Namespace) -> BootstrapSettings:
    settings = load_settings()
    overrides = {}
    if args.theme:
        overrides["theme"] = args.theme
    if args.cdn:
        overrides["use_cdn_resources"] = True
    return dataclasses.replace(settings, **overrides) if overrides else settings


def render_head_html(settings: BootstrapSettings) -> str:
    response = HeaderResponse()
    RESOURCES_RENDERER.render(settings, response)
    return response.to_html(indent="")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger.debug("Bootstrap theme CLI starting: %s", args.command)

    try:
        settings = effective_settings(args)
        if args.command == "serve":
            run_local_server(host=args.host, port=args.port, settings=settings)
        elif args.command == "head":
            print(render_head_html(settings))
        else:  # pragma: no cover - argparse enforces choices
            parser.print_help()
    except BootstrapError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
