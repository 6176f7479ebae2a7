"""Summary: Named keyword rule sets.

Importance: Provides the category rules the classifier evaluates in priority order.
Alternatives: Store rule sets in JSON files outside the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass

from chatcluster.models import CategoryRule

QUESTIONS = "Questions"
ISSUES = "Issues/Bugs"
REQUESTS = "Requests"
GENERAL_CHAT = "General Chat"

V0_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(label=QUESTIONS, keywords=("?", "how ", "what ", "why ")),
    CategoryRule(label=ISSUES, keywords=("bug", "error", "broken", "issue")),
    CategoryRule(label=REQUESTS, keywords=("please", "can you", "could you", "would you")),
    CategoryRule(label=GENERAL_CHAT),
)

# Bare question words also match inside longer words ("showtime" -> "how").
LOOSE_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(label=QUESTIONS, keywords=("?", "how", "what", "why")),
    CategoryRule(label=ISSUES, keywords=("bug", "error", "broken", "issue")),
    CategoryRule(label=REQUESTS, keywords=("please", "can you", "could you")),
    CategoryRule(label=GENERAL_CHAT),
)

DEFAULT_RULE_SET = "v0"


@dataclass(frozen=True)
class RuleSet:
    """Summary: Represents a named, ordered set of category rules.

    Importance: Lets callers choose a rule variant by name from config or the CLI.
    Alternatives: Hardcode a single rule list in the classifier.
    """

    name: str
    rules: tuple[CategoryRule, ...]

    @property
    def labels(self) -> list[str]:
        return [rule.label for rule in self.rules]


def list_rule_sets() -> list[RuleSet]:
    """Summary: Return available rule sets.

    Importance: Powers CLI and API discovery of rule variants.
    Alternatives: Use a plugin system to discover rule sets dynamically.
    """

    return [
        RuleSet(name="v0", rules=V0_RULES),
        RuleSet(name="loose", rules=LOOSE_RULES),
    ]


def get_rule_set(name: str) -> RuleSet:
    """Summary: Look up a rule set by name.

    Importance: Fails early on configuration typos.
    Alternatives: Fall back silently to the default rule set.
    """

    rule_sets = {rule_set.name: rule_set for rule_set in list_rule_sets()}
    rule_set = rule_sets.get(name)
    if not rule_set:
        raise ValueError(f"Unknown rule set: {name}")
    return rule_set
