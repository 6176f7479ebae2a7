"""Summary: Shared fixtures for ChatCluster tests.

Importance: Keeps message construction consistent across test modules.
Alternatives: Build Message objects inline in every test.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from chatcluster.config import AppConfig
from chatcluster.models import Message


def make_messages(*texts: str) -> list[Message]:
    return [Message(text=text, author="TestUser", timestamp=0.0) for text in texts]


def wire_messages(*texts: str) -> list[dict[str, object]]:
    return [{"text": text, "author": "TestUser", "timestamp": 1638360000000} for text in texts]


def build_config(**overrides: object) -> AppConfig:
    """Summary: Build an AppConfig for tests.

    Importance: Ensures tests do not depend on the working directory.
    Alternatives: Load AppConfig from environment variables.
    """

    values: dict[str, object] = {
        "rule_set": "v0",
        "sample_limit": 3,
        "engagement_threshold": 20,
        "log_level": "INFO",
        "api_key": "",
    }
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture
def defaults_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Summary: Provide a working directory containing config/defaults.json.

    Importance: Lets entry points call AppConfig.from_env in isolation.
    Alternatives: Patch AppConfig.from_env in each test.
    """

    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "defaults.json").write_text(
        json.dumps(
            {
                "rule_set": "v0",
                "sample_limit": "3",
                "engagement_threshold": "20",
                "log_level": "INFO",
                "api_key": "",
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    for name in (
        "CHATCLUSTER_RULE_SET",
        "CHATCLUSTER_SAMPLE_LIMIT",
        "CHATCLUSTER_ENGAGEMENT_THRESHOLD",
        "CHATCLUSTER_LOG_LEVEL",
        "CHATCLUSTER_API_KEY",
    ):
        # setenv first so load_dotenv writes are undone at teardown.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path
