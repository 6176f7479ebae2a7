"""Summary: Keyword-based chat message classifier.

Importance: Groups chat messages into labeled buckets without any model or network access.
Alternatives: Use an LLM-based or supervised classifier for higher accuracy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from chatcluster.models import Bucket, CategoryRule, ClassificationResult, Message
from chatcluster.rule_sets import V0_RULES

DEFAULT_SAMPLE_LIMIT = 3


@dataclass(frozen=True)
class RuleBasedClassifier:
    """Summary: Assigns each message to the first matching category rule.

    Importance: Offers deterministic, single-pass categorization of a message batch.
    Alternatives: Score every category and pick the highest-weighted match.
    """

    rules: tuple[CategoryRule, ...] = field(default=V0_RULES)
    sample_limit: int = DEFAULT_SAMPLE_LIMIT

    def __post_init__(self) -> None:
        if not self.rules or not self.rules[-1].is_catch_all:
            raise ValueError("Rule set must end with a catch-all rule")
        if self.sample_limit < 1:
            raise ValueError("Sample limit must be at least 1")

    def label_for(self, text: str) -> str:
        """Summary: Return the label of the first rule matching the text.

        Importance: Applies case-insensitive substring matching in priority order.
        Alternatives: Return every matching label and let callers choose.
        """

        lowered = text.lower()
        return next(rule.label for rule in self.rules if rule.matches(lowered))

    def classify(self, messages: Iterable[Message]) -> ClassificationResult:
        """Summary: Classify a batch of messages into priority-ordered buckets.

        Importance: Produces counts and first-seen samples for each non-empty category.
        Alternatives: Stream per-message labels instead of aggregated buckets.
        """

        matched: dict[str, list[str]] = {rule.label: [] for rule in self.rules}
        processed = 0
        for message in messages:
            matched[self.label_for(message.text)].append(message.text)
            processed += 1
        buckets = tuple(
            Bucket(
                label=label,
                count=len(texts),
                sample_messages=tuple(texts[: self.sample_limit]),
            )
            for label, texts in matched.items()
            if texts
        )
        return ClassificationResult(buckets=buckets, processed_count=processed)
