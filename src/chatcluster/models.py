"""Summary: Domain model dataclasses for ChatCluster.

Importance: Defines the input records and output shapes shared by the classifier and codec.
Alternatives: Use Pydantic models or plain dictionaries directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """Summary: Represents a single chat message.

    Importance: Core unit of input; only the text drives classification.
    Alternatives: Pass raw strings and drop author and timestamp metadata.
    """

    text: str
    author: str
    timestamp: float


@dataclass(frozen=True)
class CategoryRule:
    """Summary: Represents a labeled keyword rule.

    Importance: Rules are evaluated in order and the first match wins.
    Alternatives: Use compiled regular expressions per category.
    """

    label: str
    keywords: tuple[str, ...] = ()

    @property
    def is_catch_all(self) -> bool:
        return not self.keywords

    def matches(self, lowered_text: str) -> bool:
        """Summary: Check a lower-cased text against the rule keywords.

        Importance: Uses substring containment so keywords match inside words.
        Alternatives: Tokenize the text and match whole words only.
        """

        if self.is_catch_all:
            return True
        return any(keyword in lowered_text for keyword in self.keywords)


@dataclass(frozen=True)
class Bucket:
    """Summary: Represents one non-empty category in a result.

    Importance: Carries the total count and the first few matched messages.
    Alternatives: Return every matched message instead of samples.
    """

    label: str
    count: int
    sample_messages: tuple[str, ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Summary: Represents the output of a classification call.

    Importance: Groups buckets in priority order with the number of processed messages.
    Alternatives: Return a label per message and aggregate on the caller side.
    """

    buckets: tuple[Bucket, ...]
    processed_count: int

    def bucket(self, label: str) -> Bucket | None:
        for bucket in self.buckets:
            if bucket.label == label:
                return bucket
        return None
