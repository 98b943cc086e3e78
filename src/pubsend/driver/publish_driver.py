"""Concurrent publish driver for Pub/Sub topics."""

import asyncio
import contextlib
import logging
import time
from typing import BinaryIO, Optional

from pubsend.errors import DeliveryError, TopicNotFoundError
from pubsend.models.response import PublishOutcome, PublishSummary
from pubsend.models.topic import TopicRef
from pubsend.payload import load_messages, validate_batch
from pubsend.protocols.publisher import AsyncTopicPublisher

logger = logging.getLogger(__name__)


class PublishDriver:
    """
    Publishes a batch of payloads to one topic concurrently.

    Responsibilities:
    - Decode and validate the batch before any network call
    - Resolve the topic and check that it exists
    - Publish every message as its own task and join them all
    - Report aggregate statistics, or the first failure to complete

    Delivery, batching and retries are the publisher's job.
    """

    def __init__(
        self,
        publisher: AsyncTopicPublisher,
        max_concurrency: Optional[int] = None,
    ):
        """
        Initialize the publish driver.

        Args:
            publisher: Adapter implementing AsyncTopicPublisher protocol
            max_concurrency: Upper bound on publishes in flight, None for no bound
        """
        self.publisher = publisher
        self.max_concurrency = max_concurrency

    async def run(
        self,
        topic: str,
        data: str,
        project: Optional[str] = None,
        stdin: Optional[BinaryIO] = None,
    ) -> PublishSummary:
        """
        Run the full pipeline for one invocation.

        Args:
            topic: Short topic name or 'projects/PROJECT_ID/topics/NAME'
            data: Base64 or raw payload, or '-' to read base64 lines from stdin
            project: Project used to resolve a short topic name
            stdin: Binary stream read when data is '-'

        Returns:
            PublishSummary of the published batch
        """
        messages = load_messages(data, stdin)
        validate_batch(messages)

        ref = TopicRef.parse(topic, project)
        if not await self.publisher.topic_exists(ref.path):
            raise TopicNotFoundError(ref.path)

        return await self.publish(ref.path, messages)

    async def publish(self, topic: str, messages: list[bytes]) -> PublishSummary:
        """
        Publish an already validated batch and wait for every message.

        When several messages fail, the one whose failure completed first is
        reported; which one that is depends on scheduling.

        Raises:
            DeliveryError: at least one message could not be published
        """
        outcomes: list[Optional[PublishOutcome]] = [None] * len(messages)
        failures: list[PublishOutcome] = []
        if self.max_concurrency:
            limit = asyncio.Semaphore(self.max_concurrency)
        else:
            limit = None

        start = time.monotonic()
        await asyncio.gather(
            *(
                self._publish_one(topic, idx, msg, limit, outcomes, failures)
                for idx, msg in enumerate(messages)
            )
        )
        elapsed = time.monotonic() - start

        if failures:
            first = failures[0]
            raise DeliveryError(first.index, first.error) from first.error

        return PublishSummary(
            topic=topic,
            total_bytes=sum(len(msg) for msg in messages),
            message_count=len(messages),
            elapsed=elapsed,
            outcomes=[outcome for outcome in outcomes if outcome is not None],
        )

    async def list_topics(self, project: str) -> list[str]:
        """Return the short topic IDs of a project."""
        return await self.publisher.list_topics(project)

    async def _publish_one(
        self,
        topic: str,
        index: int,
        data: bytes,
        limit: Optional[asyncio.Semaphore],
        outcomes: list[Optional[PublishOutcome]],
        failures: list[PublishOutcome],
    ) -> None:
        async with limit if limit is not None else contextlib.nullcontext():
            try:
                message_id = await self.publisher.publish(topic, data)
            except Exception as exc:
                outcome = PublishOutcome(index=index, error=exc)
            else:
                outcome = PublishOutcome(index=index, message_id=message_id)
        outcomes[index] = outcome
        if outcome.ok:
            logger.info("published msg %d: %s", index, outcome.message_id)
        else:
            failures.append(outcome)
            logger.debug("publish msg %d failed: %s", index, outcome.error)
