"""Fixtures for Pub/Sub emulator integration tests."""

import os
import subprocess
import time
import uuid

import pytest
from google.cloud import pubsub_v1

EMULATOR_PORT = 8681  # Non-default port to avoid conflicts
EMULATOR_PROJECT = "pubsend-test"


@pytest.fixture(scope="session")
def pubsub_emulator():
    """Start the Pub/Sub emulator Docker container for the test session."""
    container_name = "pubsend-pubsub-emulator-test"

    # Clean up any existing container
    subprocess.run(["docker", "rm", "-f", container_name], capture_output=True)

    subprocess.run(
        [
            "docker",
            "run",
            "-d",
            "--name",
            container_name,
            "-p",
            f"{EMULATOR_PORT}:8085",
            "gcr.io/google.com/cloudsdktool/google-cloud-cli:emulators",
            "gcloud",
            "beta",
            "emulators",
            "pubsub",
            "start",
            "--host-port=0.0.0.0:8085",
            f"--project={EMULATOR_PROJECT}",
        ],
        check=True,
        capture_output=True,
    )

    # Wait for the emulator to be ready
    time.sleep(10)

    previous = os.environ.get("PUBSUB_EMULATOR_HOST")
    os.environ["PUBSUB_EMULATOR_HOST"] = f"localhost:{EMULATOR_PORT}"

    yield

    if previous is None:
        os.environ.pop("PUBSUB_EMULATOR_HOST", None)
    else:
        os.environ["PUBSUB_EMULATOR_HOST"] = previous

    # Cleanup
    subprocess.run(["docker", "stop", container_name], capture_output=True)
    subprocess.run(["docker", "rm", container_name], capture_output=True)


@pytest.fixture(scope="session")
def publisher_client(pubsub_emulator) -> pubsub_v1.PublisherClient:
    """Provide a PublisherClient bound to the emulator."""
    return pubsub_v1.PublisherClient()


@pytest.fixture(scope="session")
def subscriber_client(pubsub_emulator) -> pubsub_v1.SubscriberClient:
    """Provide a SubscriberClient bound to the emulator."""
    return pubsub_v1.SubscriberClient()


@pytest.fixture
def test_topic(publisher_client, subscriber_client):
    """Create a unique topic with one subscription and clean up after the test."""
    suffix = uuid.uuid4().hex[:12]
    topic_path = publisher_client.topic_path(EMULATOR_PROJECT, f"test-topic-{suffix}")
    subscription_path = subscriber_client.subscription_path(
        EMULATOR_PROJECT, f"test-sub-{suffix}"
    )
    publisher_client.create_topic(request={"name": topic_path})
    subscriber_client.create_subscription(
        request={"name": subscription_path, "topic": topic_path}
    )

    yield topic_path, subscription_path

    # Cleanup
    subscriber_client.delete_subscription(request={"subscription": subscription_path})
    publisher_client.delete_topic(request={"topic": topic_path})


@pytest.fixture(scope="session")
def emulator_project() -> str:
    """Project ID the emulator was started with."""
    return EMULATOR_PROJECT
