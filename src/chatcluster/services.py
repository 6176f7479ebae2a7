"""Summary: Service layer for ChatCluster workflows.

Importance: Wires the codec and classifier together for the CLI and API.
Alternatives: Call codec functions directly from each entry point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chatcluster.classifier import RuleBasedClassifier
from chatcluster.codec import encode_result, encode_result_json, parse_messages
from chatcluster.errors import ParseError
from chatcluster.models import ClassificationResult
from chatcluster.summary import DEFAULT_ENGAGEMENT_THRESHOLD, summarize_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusterService:
    """Summary: Classifies serialized message batches.

    Importance: Provides one all-or-nothing path from payload to result.
    Alternatives: Keep parsing and classification in the HTTP handlers.
    """

    classifier: RuleBasedClassifier
    engagement_threshold: int = DEFAULT_ENGAGEMENT_THRESHOLD

    def classify_payload(self, payload: str | bytes | list[Any]) -> ClassificationResult:
        """Summary: Parse a payload and classify its messages.

        Importance: Logs rejected payloads before re-raising the parse error.
        Alternatives: Return an empty result for invalid payloads.
        """

        try:
            messages = parse_messages(payload)
        except ParseError as exc:
            logger.warning("Rejected message payload: %s", exc)
            raise
        result = self.classifier.classify(messages)
        logger.info(
            "Clustered %s messages into %s buckets.",
            result.processed_count,
            len(result.buckets),
        )
        return result

    def cluster(self, payload: str | bytes | list[Any]) -> dict[str, Any]:
        return encode_result(self.classify_payload(payload))

    def cluster_json(self, payload: str | bytes | list[Any], indent: int | None = None) -> str:
        return encode_result_json(self.classify_payload(payload), indent=indent)

    def summarize(self, payload: str | bytes | list[Any]) -> dict[str, Any]:
        """Summary: Classify a payload and describe the resulting buckets.

        Importance: Gives a quick read of chat focus for dashboards.
        Alternatives: Let clients build summaries from the raw buckets.
        """

        result = self.classify_payload(payload)
        return {
            "summary": summarize_result(result, self.engagement_threshold),
            "bucket_count": len(result.buckets),
        }
