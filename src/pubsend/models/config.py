"""Run configuration built once from the command line."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PublishConfig(BaseModel):
    """
    Immutable settings for a single pubsend invocation.

    Built once by the CLI and passed explicitly to every step that needs it.
    """

    model_config = ConfigDict(frozen=True)

    project: Optional[str] = None
    list_topics: bool = False
    verbose: bool = False
    max_concurrency: Optional[int] = Field(default=None, ge=1)
    topic: Optional[str] = None
    data: Optional[str] = None

    @property
    def topic_is_path(self) -> bool:
        """True when the topic is given as a fully qualified path."""
        return bool(self.topic) and "/" in self.topic

    @property
    def needs_project(self) -> bool:
        """Whether the active project has to be discovered for this run."""
        return self.list_topics or not self.topic_is_path
