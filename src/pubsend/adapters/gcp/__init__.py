"""Google Cloud Pub/Sub adapter for pubsend publisher protocols."""

from pubsend.adapters.gcp.publisher import GCPPublisher

__all__ = ["GCPPublisher"]
