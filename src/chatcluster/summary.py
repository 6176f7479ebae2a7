"""Summary: Deterministic text digest of classification results.

Importance: Gives a short overview of what the chat is focused on without an LLM.
Alternatives: Send bucket samples to a language model for a richer summary.
"""

from __future__ import annotations

from chatcluster.models import ClassificationResult

DEFAULT_ENGAGEMENT_THRESHOLD = 20
NO_PATTERNS = "No significant patterns detected in the chat."


def summarize_result(
    result: ClassificationResult,
    engagement_threshold: int = DEFAULT_ENGAGEMENT_THRESHOLD,
) -> str:
    """Summary: Describe the dominant bucket and the next most active ones.

    Importance: Powers the summarize command and endpoint.
    Alternatives: Render only the raw bucket counts.
    """

    buckets = list(result.buckets)
    if not buckets:
        return NO_PATTERNS

    # max() keeps the first bucket on ties, which is the higher-priority one.
    top = max(buckets, key=lambda bucket: bucket.count)
    sections = [f"Main focus: {top.label} ({top.count} messages)"]

    others = sorted(
        (bucket for bucket in buckets if bucket is not top),
        key=lambda bucket: bucket.count,
        reverse=True,
    )[:2]
    if others:
        active = ", ".join(f"{bucket.label} ({bucket.count})" for bucket in others)
        sections.append(f"Also active: {active}")

    total = sum(bucket.count for bucket in buckets)
    if total > engagement_threshold:
        sections.append(f"High engagement with {total} messages analyzed.")
    return "\n\n".join(sections)
