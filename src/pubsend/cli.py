"""pubsend command-line interface entrypoint."""

import argparse
import asyncio
import logging
import os
import sys
from typing import BinaryIO, Optional, Sequence

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import pubsub_v1
from pydantic import ValidationError

from pubsend.adapters.gcp import GCPPublisher
from pubsend.driver.publish_driver import PublishDriver
from pubsend.errors import PubSendError, UsageError
from pubsend.models.config import PublishConfig
from pubsend.payload import STDIN_MARKER
from pubsend.project import discover_project
from pubsend.protocols.publisher import AsyncTopicPublisher

logger = logging.getLogger("pubsend")

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, so bad usage exits 1 like other errors."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        usage="%(prog)s [options] <topic> <base64_data>",
        description=(
            "Publish messages to a Pub/Sub topic. Data that is valid base64 is sent "
            "decoded, anything else is sent as-is. Pass '-' as data to read one "
            "base64 message per line from stdin."
        ),
    )
    parser.add_argument(
        "-project",
        "--project",
        default=None,
        help="Google project ID (defaults to gcloud settings)",
    )
    parser.add_argument(
        "-list",
        "--list",
        dest="list_topics",
        action="store_true",
        help="list available topics",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument(
        "-max-concurrency",
        "--max-concurrency",
        type=int,
        default=None,
        help="maximum number of messages in flight (default: unbounded)",
    )
    # Options end at the first positional, so data such as "-raw-text" stays data.
    parser.add_argument("args", nargs=argparse.REMAINDER, metavar="<topic> <data>")
    return parser


def parse_config(argv: Optional[Sequence[str]], prog: Optional[str] = None) -> PublishConfig:
    """Parse argv into a validated PublishConfig."""
    args = build_parser(prog).parse_args(argv)
    positionals = list(args.args)
    if len(positionals) > 2:
        logger.warning("ignoring arguments after data: %s", " ".join(positionals[2:]))
    topic, data = (positionals + [None, None])[:2]
    try:
        config = PublishConfig(
            project=args.project,
            list_topics=args.list_topics,
            verbose=args.verbose,
            max_concurrency=args.max_concurrency,
            topic=topic,
            data=data,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise UsageError(problems) from exc

    if not config.list_topics:
        if not config.topic:
            raise UsageError("expects topic as first argument")
        if not config.data:
            raise UsageError("expects data as second argument")
    return config


def configure_logging(verbose: bool) -> None:
    """Send pubsend diagnostics to stderr with millisecond timestamps when verbose."""
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_publisher() -> AsyncTopicPublisher:
    """Create the Pub/Sub publisher; honours PUBSUB_EMULATOR_HOST."""
    return GCPPublisher(pubsub_v1.PublisherClient())


async def run(config: PublishConfig, stdin: Optional[BinaryIO] = None) -> None:
    """Execute one invocation described by config, writing results to stdout."""
    project = None
    if config.needs_project:
        project = discover_project(config.project)
        logger.info("project: %s", project)

    publisher = build_publisher()
    driver = PublishDriver(publisher, max_concurrency=config.max_concurrency)
    try:
        if config.list_topics:
            for topic_id in await driver.list_topics(project):
                print(topic_id)
            return

        summary = await driver.run(config.topic, config.data, project=project, stdin=stdin)
        print(summary)
    finally:
        await publisher.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entrypoint; returns the process exit code."""
    prog = os.path.basename(sys.argv[0]) or "pubsend"
    try:
        config = parse_config(argv, prog=prog)
        configure_logging(config.verbose)
        stdin = sys.stdin.buffer if config.data == STDIN_MARKER else None
        asyncio.run(run(config, stdin))
    except (PubSendError, GoogleAPIError, GoogleAuthError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(f"{prog}: interrupted", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
