"""Topic references: short names or fully qualified paths."""

import logging
from dataclasses import dataclass
from typing import Optional

from pubsend.errors import ProjectDiscoveryError, TopicFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicRef:
    """A topic identified by its project and short name."""

    project: str
    name: str

    @property
    def path(self) -> str:
        """Fully qualified topic path, e.g. 'projects/PROJECT_ID/topics/NAME'."""
        return f"projects/{self.project}/topics/{self.name}"

    def __str__(self) -> str:
        return self.path

    @classmethod
    def parse(cls, topic: str, default_project: Optional[str] = None) -> "TopicRef":
        """
        Resolve a topic argument.

        Args:
            topic: Short topic name, or 'projects/PROJECT_ID/topics/NAME'
            default_project: Project used when topic is a short name

        Raises:
            TopicFormatError: topic contains '/' but is not a four-segment path
            ProjectDiscoveryError: topic is a short name and no project is known
        """
        if "/" in topic:
            logger.info("assuming topic is full path: %s", topic)
            parts = topic.split("/")
            if (
                len(parts) != 4
                or parts[0] != "projects"
                or parts[2] != "topics"
                or not parts[1]
                or not parts[3]
            ):
                raise TopicFormatError(topic)
            return cls(project=parts[1], name=parts[3])

        if not default_project:
            raise ProjectDiscoveryError(f"no project to resolve topic {topic!r} in")
        return cls(project=default_project, name=topic)
