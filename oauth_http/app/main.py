from __future__ import annotations

import argparse
import sys
from typing import Sequence

from loguru import logger

from oauth_http.app.application.dispatcher import TransportDispatcher
from oauth_http.app.composition import create_dispatcher
from oauth_http.app.config.settings import Settings
from oauth_http.app.constants import TRANSPORT_BACKEND, VERSION
from oauth_http.app.ports.http_transport import HttpTransportError


def cmd_get(dispatcher: TransportDispatcher, args: argparse.Namespace) -> bytes:
    return dispatcher.http_get(args.url, args.query)


def cmd_post(dispatcher: TransportDispatcher, args: argparse.Namespace) -> bytes:
    return dispatcher.http_post(args.url, args.body)


def cmd_post_file(dispatcher: TransportDispatcher, args: argparse.Namespace) -> bytes:
    return dispatcher.post_file(args.url, args.path, args.length, args.content_type)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oauth-http", description="Blocking HTTP requests for OAuth clients.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--backend",
        choices=[TRANSPORT_BACKEND.LIBRARY, TRANSPORT_BACKEND.COMMAND],
        help="override OAUTH_HTTP_BACKEND",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log request events to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="HTTP GET")
    get.add_argument("url")
    get.add_argument("query", nargs="?", default=None)
    get.set_defaults(func=cmd_get)

    post = sub.add_parser("post", help="HTTP POST with a literal body")
    post.add_argument("url")
    post.add_argument("body")
    post.set_defaults(func=cmd_post)

    post_file = sub.add_parser("post-file", help="HTTP POST raw file content")
    post_file.add_argument("url")
    post_file.add_argument("path")
    post_file.add_argument("--length", type=int, default=0, help="bytes to send; 0 uses the file size")
    post_file.add_argument("--content-type", default=None, help="content type or full 'Name: value' header")
    post_file.set_defaults(func=cmd_post_file)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        settings = Settings()
        if args.backend:
            settings = settings.model_copy(update={"transport_backend": args.backend})
        dispatcher = create_dispatcher(settings)
        reply = args.func(dispatcher, args)
    except (HttpTransportError, ValueError) as exc:
        print(f"oauth-http: {exc}", file=sys.stderr)
        return 2

    sys.stdout.buffer.write(reply)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
