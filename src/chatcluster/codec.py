"""Summary: Wire codec for ChatCluster inputs and results.

Importance: Validates incoming message arrays and encodes results at the call boundary.
Alternatives: Trust callers to pass well-formed Message objects directly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from chatcluster.classifier import RuleBasedClassifier
from chatcluster.errors import ParseError, SerializationError
from chatcluster.models import ClassificationResult, Message


class MessagePayload(BaseModel):
    """Summary: Wire shape of an incoming chat message.

    Importance: Rejects missing or mistyped fields before classification.
    Alternatives: Coerce loosely typed values instead of rejecting them.
    """

    text: str = Field(strict=True)
    author: str = Field(strict=True)
    timestamp: float = Field(strict=True)

    def to_message(self) -> Message:
        return Message(text=self.text, author=self.author, timestamp=self.timestamp)


class BucketPayload(BaseModel):
    """Wire shape of an output bucket."""

    label: str
    count: int
    sample_messages: list[str]


class ClusterResultPayload(BaseModel):
    """Summary: Wire shape of a classification result.

    Importance: Keeps output field names stable for UI and API clients.
    Alternatives: Serialize the dataclasses with dataclasses.asdict.
    """

    buckets: list[BucketPayload]
    processed_count: int


_MESSAGES_ADAPTER = TypeAdapter(list[MessagePayload])


def parse_messages(payload: str | bytes | list[Any]) -> list[Message]:
    """Summary: Parse a message array from JSON text or decoded Python data.

    Importance: Converts untrusted input into validated Message records.
    Alternatives: Accept only pre-decoded lists of dictionaries.
    """

    try:
        if isinstance(payload, (str, bytes)):
            records = _MESSAGES_ADAPTER.validate_json(payload)
        else:
            records = _MESSAGES_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise ParseError(exc) from exc
    return [record.to_message() for record in records]


def _to_payload(result: ClassificationResult) -> ClusterResultPayload:
    try:
        return ClusterResultPayload(
            buckets=[
                BucketPayload(
                    label=bucket.label,
                    count=bucket.count,
                    sample_messages=list(bucket.sample_messages),
                )
                for bucket in result.buckets
            ],
            processed_count=result.processed_count,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(exc) from exc


def encode_result(result: ClassificationResult) -> dict[str, Any]:
    """Summary: Encode a result into its wire dictionary.

    Importance: Produces the exact field layout expected by clients.
    Alternatives: Return the dataclass and let callers serialize it.
    """

    payload = _to_payload(result)
    try:
        return payload.model_dump(mode="json")
    except (TypeError, ValueError) as exc:
        raise SerializationError(exc) from exc


def encode_result_json(result: ClassificationResult, indent: int | None = None) -> str:
    """Summary: Encode a result as JSON text.

    Importance: Supports CLI output without a second encoding pass.
    Alternatives: Call json.dumps on the encoded dictionary.
    """

    payload = _to_payload(result)
    try:
        return payload.model_dump_json(indent=indent)
    except (TypeError, ValueError) as exc:
        raise SerializationError(exc) from exc


def cluster_messages(
    payload: str | bytes | list[Any],
    classifier: RuleBasedClassifier | None = None,
) -> dict[str, Any]:
    """Summary: Parse, classify, and encode a message array in one call.

    Importance: Single entry point at the boundary; either a full result or an error.
    Alternatives: Expose parsing and classification as separate calls only.
    """

    messages = parse_messages(payload)
    result = (classifier or RuleBasedClassifier()).classify(messages)
    return encode_result(result)
