"""Publisher protocol definitions."""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class AsyncTopicPublisher(Protocol):
    """Async protocol for publishing messages to Pub/Sub topics."""

    async def topic_exists(self, topic: str) -> bool:
        """
        Check whether a topic exists.

        Args:
            topic: Full topic path (e.g., 'projects/PROJECT_ID/topics/TOPIC_NAME')

        Returns:
            True if the topic exists, False if it does not
        """
        ...

    async def list_topics(self, project: str) -> list[str]:
        """
        List the topics of a project.

        Args:
            project: Project ID

        Returns:
            Short topic IDs
        """
        ...

    async def publish(self, topic: str, data: bytes, **kwargs: Any) -> str:
        """
        Publish a message to a topic and wait for its acknowledgment.

        Args:
            topic: Full topic path (e.g., 'projects/PROJECT_ID/topics/TOPIC_NAME')
            data: Message data as bytes
            **kwargs: Additional keyword arguments (e.g., attributes)

        Returns:
            Server-assigned message ID
        """
        ...

    async def close(self) -> None:
        """Flush pending messages and release the underlying client."""
        ...
