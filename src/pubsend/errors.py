"""Exceptions raised by pubsend."""


class PubSendError(Exception):
    """Base class for every fatal pubsend error."""


class UsageError(PubSendError):
    """Missing or invalid command-line arguments."""


class ProjectDiscoveryError(PubSendError):
    """The active project could not be determined."""


class TopicFormatError(PubSendError):
    """A fully qualified topic path did not match projects/PROJECT_ID/topics/NAME."""

    def __init__(self, topic: str):
        super().__init__(f"invalid format: expects projects/PROJECT_ID/topics/NAME: {topic}")
        self.topic = topic


class MessageDecodeError(PubSendError):
    """A line read from stdin was not valid base64."""

    def __init__(self, line_index: int, cause: Exception):
        super().__init__(f"decode line {line_index}: {cause}")
        self.line_index = line_index
        self.cause = cause


class EmptyBatchError(PubSendError):
    """There was nothing to publish."""

    def __init__(self):
        super().__init__("no data to publish")


class DuplicatePayloadError(PubSendError):
    """Two or more payloads in the batch were byte-for-byte identical."""

    def __init__(self, duplicates: list[bytes]):
        super().__init__(f"duplicates found: {duplicates!r}")
        self.duplicates = duplicates


class TopicNotFoundError(PubSendError):
    """The resolved topic does not exist."""

    def __init__(self, topic: str):
        super().__init__(f"topic not found: {topic}")
        self.topic = topic


class DeliveryError(PubSendError):
    """Publishing a single message failed."""

    def __init__(self, index: int, cause: BaseException):
        super().__init__(f"publish msg {index}: {cause}")
        self.index = index
        self.cause = cause
