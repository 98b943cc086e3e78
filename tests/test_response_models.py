"""Tests for result models (PublishOutcome, PublishSummary)."""

from pubsend.models.response import PublishOutcome, PublishSummary, format_elapsed


class TestPublishOutcome:
    """Test PublishOutcome model."""

    def test_outcome_with_message_id_is_ok(self):
        """An outcome carrying a server ID is a success."""
        outcome = PublishOutcome(index=0, message_id="1234")

        assert outcome.ok is True
        assert outcome.error is None

    def test_outcome_with_error_is_not_ok(self):
        """An outcome carrying an error is a failure."""
        outcome = PublishOutcome(index=3, error=RuntimeError("boom"))

        assert outcome.ok is False
        assert outcome.message_id is None


class TestPublishSummary:
    """Test PublishSummary rendering."""

    def test_summary_line(self):
        """str() renders the one-line success report."""
        summary = PublishSummary(
            topic="projects/p1/topics/t1",
            total_bytes=5,
            message_count=1,
            elapsed=0.0123,
        )

        assert str(summary) == (
            "published 5 bytes to projects/p1/topics/t1 across 1 message(s) in 12.3ms"
        )

    def test_format_elapsed_units(self):
        """Durations pick a readable unit."""
        assert format_elapsed(0.000250) == "250µs"
        assert format_elapsed(0.5) == "500.0ms"
        assert format_elapsed(2.0) == "2.000s"
