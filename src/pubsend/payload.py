"""Turning command-line data into a batch of message payloads."""

import base64
import binascii
import logging
from typing import BinaryIO, Optional

from pubsend.errors import DuplicatePayloadError, EmptyBatchError, MessageDecodeError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def decode_argument(data: str) -> bytes:
    """
    Decode a single data argument.

    Valid base64 is sent decoded. Anything else is sent as the UTF-8 bytes of
    the argument itself, so this never raises.
    """
    try:
        return base64.b64decode(data, validate=True)
    except ValueError:
        # binascii.Error, or non-ASCII characters in the argument
        return data.encode("utf-8")


def read_lines(stream: BinaryIO) -> list[bytes]:
    """
    Read newline-delimited base64 payloads from a stream.

    Blank and whitespace-only lines are skipped. Decode errors report the
    0-based index of the offending line in the raw input.

    Raises:
        MessageDecodeError: a non-blank line is not valid base64
    """
    logger.info("reading data from stdin")
    messages: list[bytes] = []
    for idx, line in enumerate(stream.read().split(b"\n")):
        trimmed = line.strip()
        if not trimmed:
            continue
        try:
            messages.append(base64.b64decode(trimmed, validate=True))
        except binascii.Error as exc:
            raise MessageDecodeError(idx, exc) from exc
    return messages


def load_messages(data: str, stdin: Optional[BinaryIO] = None) -> list[bytes]:
    """Decode the data argument, reading stdin when it is '-'."""
    if data == STDIN_MARKER:
        if stdin is None:
            raise ValueError("stdin stream required when data is '-'")
        return read_lines(stdin)
    return [decode_argument(data)]


def find_duplicates(messages: list[bytes]) -> list[bytes]:
    """Return each payload that occurs more than once, in order of its first repeat."""
    seen: set[bytes] = set()
    reported: set[bytes] = set()
    duplicates: list[bytes] = []
    for msg in messages:
        if msg not in seen:
            seen.add(msg)
        elif msg not in reported:
            reported.add(msg)
            duplicates.append(msg)
    return duplicates


def validate_batch(messages: list[bytes]) -> None:
    """
    Reject batches that must not be published.

    Raises:
        EmptyBatchError: there are no messages
        DuplicatePayloadError: two payloads are byte-for-byte identical
    """
    if not messages:
        raise EmptyBatchError()

    if len(messages) > 1:
        logger.info("publishing %d messages", len(messages))

    duplicates = find_duplicates(messages)
    if duplicates:
        raise DuplicatePayloadError(duplicates)
