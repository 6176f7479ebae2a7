"""Summary: Application factory wiring core services.

Importance: Centralizes dependency creation for the CLI and API layers.
Alternatives: Instantiate services manually in each entrypoint.
"""

from __future__ import annotations

from dataclasses import dataclass

from chatcluster.classifier import RuleBasedClassifier
from chatcluster.config import AppConfig
from chatcluster.rule_sets import get_rule_set
from chatcluster.services import ClusterService


@dataclass(frozen=True)
class AppServices:
    """Summary: Bundle of core services for ChatCluster.

    Importance: Simplifies passing dependencies to CLI or API layers.
    Alternatives: Use a dependency injection container.
    """

    clustering: ClusterService
    config: AppConfig


def build_classifier(config: AppConfig, rule_set: str | None = None) -> RuleBasedClassifier:
    """Summary: Build a classifier from configuration.

    Importance: Applies the configured rule set and sample limit in one place.
    Alternatives: Read configuration inside the classifier.
    """

    rules = get_rule_set(rule_set or config.rule_set).rules
    return RuleBasedClassifier(rules=rules, sample_limit=config.sample_limit)


def build_services(config: AppConfig, rule_set: str | None = None) -> AppServices:
    """Summary: Build core services from configuration.

    Importance: Provides a single construction path for the application.
    Alternatives: Instantiate services directly within the CLI entrypoint.
    """

    clustering = ClusterService(
        classifier=build_classifier(config, rule_set),
        engagement_threshold=config.engagement_threshold,
    )
    return AppServices(clustering=clustering, config=config)
