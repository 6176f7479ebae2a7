"""Summary: Application configuration for ChatCluster.

Importance: Centralizes environment, .env, and config defaults for consistent behavior.
Alternatives: Use a dedicated settings library like Pydantic Settings.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULTS_PATH = Path("config") / "defaults.json"


@dataclass(frozen=True)
class AppConfig:
    """Summary: Holds configuration values for classification and the HTTP layer.

    Importance: Ensures all entry points derive settings from a single source of truth.
    Alternatives: Pass every option as a command-line flag.
    """

    rule_set: str
    sample_limit: int
    engagement_threshold: int
    log_level: str
    api_key: str

    @staticmethod
    def from_env(defaults_path: Path = DEFAULTS_PATH) -> "AppConfig":
        """Summary: Build configuration from defaults, .env, and environment.

        Importance: Keeps all variables defined in config defaults while allowing overrides.
        Alternatives: Parse only environment variables without a defaults file.
        """

        defaults = load_defaults(defaults_path)
        load_dotenv(Path(".env"))
        return AppConfig(
            rule_set=os.getenv("CHATCLUSTER_RULE_SET", defaults["rule_set"]),
            sample_limit=int(os.getenv("CHATCLUSTER_SAMPLE_LIMIT", defaults["sample_limit"])),
            engagement_threshold=int(
                os.getenv("CHATCLUSTER_ENGAGEMENT_THRESHOLD", defaults["engagement_threshold"])
            ),
            log_level=os.getenv("CHATCLUSTER_LOG_LEVEL", defaults["log_level"]).upper(),
            api_key=os.getenv("CHATCLUSTER_API_KEY", defaults["api_key"]),
        )


def load_defaults(path: Path) -> dict[str, str]:
    """Summary: Load configuration defaults from JSON.

    Importance: Ensures all variables exist in a single config file.
    Alternatives: Inline defaults in the AppConfig initializer.
    """

    if not path.exists():
        raise FileNotFoundError(f"Defaults file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_dotenv(path: Path) -> None:
    """Summary: Load key-value pairs from a .env file into the environment.

    Importance: Supports local overrides without exporting variables by hand.
    Alternatives: Use python-dotenv or OS-specific secret stores.
    """

    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())
