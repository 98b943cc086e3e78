"""Result models for publish runs."""

from dataclasses import dataclass, field
from typing import Optional


def format_elapsed(seconds: float) -> str:
    """Render a duration the way a human reads it (e.g. '812µs', '41.2ms', '1.503s')."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.1f}ms"
    return f"{seconds:.3f}s"


@dataclass
class PublishOutcome:
    """Result of publishing one message of a batch."""

    index: int
    message_id: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PublishSummary:
    """Aggregate statistics of a successful publish run."""

    topic: str
    total_bytes: int
    message_count: int
    elapsed: float
    outcomes: list[PublishOutcome] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"published {self.total_bytes} bytes to {self.topic} "
            f"across {self.message_count} message(s) in {format_elapsed(self.elapsed)}"
        )
