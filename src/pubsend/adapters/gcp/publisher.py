"""Google Cloud Pub/Sub publisher implementing AsyncTopicPublisher protocol."""

import asyncio
from typing import Any

from google.api_core.exceptions import NotFound
from google.cloud import pubsub_v1


class GCPPublisher:
    """
    Google Cloud Pub/Sub publisher implementing AsyncTopicPublisher protocol.

    Publishing, batching and retries are left to PublisherClient. Its futures
    are awaited with asyncio.wrap_future; blocking admin calls run in a
    worker thread.
    """

    def __init__(self, client: pubsub_v1.PublisherClient):
        self._client = client

    async def topic_exists(self, topic: str) -> bool:
        """
        Check whether a topic exists.

        Args:
            topic: Full topic path

        Returns:
            False if the server answers NotFound, True otherwise
        """
        try:
            await asyncio.to_thread(self._client.get_topic, request={"topic": topic})
        except NotFound:
            return False
        return True

    async def list_topics(self, project: str) -> list[str]:
        """
        List the topics of a project.

        Args:
            project: Project ID

        Returns:
            Short topic IDs, in server order
        """

        def _list() -> list[str]:
            pages = self._client.list_topics(request={"project": f"projects/{project}"})
            return [topic.name.rsplit("/", 1)[-1] for topic in pages]

        return await asyncio.to_thread(_list)

    async def publish(self, topic: str, data: bytes, **kwargs: Any) -> str:
        """
        Publish a message and wait for the server to acknowledge it.

        Args:
            topic: Full topic path
            data: Message data as bytes
            **kwargs: Message attributes, passed through to the client

        Returns:
            Server-assigned message ID
        """
        future = self._client.publish(topic, data, **kwargs)
        return await asyncio.wrap_future(future)

    async def close(self) -> None:
        """Stop the client, flushing any batched messages first."""
        await asyncio.to_thread(self._client.stop)
