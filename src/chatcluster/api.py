"""Summary: FastAPI application for ChatCluster.

Importance: Exposes clustering over HTTP for browser extensions and dashboards.
Alternatives: Use a CLI-only workflow or a different web framework.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, Header, HTTPException, Request

from chatcluster.app import build_services
from chatcluster.config import AppConfig
from chatcluster.errors import ParseError, SerializationError
from chatcluster.rule_sets import list_rule_sets


def create_app(config: AppConfig) -> FastAPI:
    """Summary: Create a FastAPI app wired to ChatCluster services.

    Importance: Ensures the API layer shares the same configuration as the CLI.
    Alternatives: Instantiate services globally outside the factory.
    """

    if not logging.getLogger().handlers:
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    app = FastAPI(title="ChatCluster API", version="0.1.0")
    services = build_services(config)

    def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
        """Summary: Enforce API key authentication when configured.

        Importance: Adds a minimal security layer for local and private deployments.
        Alternatives: Use OAuth or session-based authentication.
        """

        if not config.api_key:
            return
        if x_api_key != config.api_key:
            raise HTTPException(status_code=401, detail="Invalid API key")

    def _run(handler: Any, payload: bytes) -> dict[str, Any]:
        try:
            return handler(payload)
        except ParseError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except SerializationError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.get("/health")
    def health() -> dict[str, str]:
        """Summary: Health check endpoint.

        Importance: Supports uptime checks in local and cloud deployments.
        Alternatives: Use a metrics endpoint only.
        """

        return {"status": "ok"}

    @app.get("/rule-sets", dependencies=[Depends(require_api_key)])
    def rule_sets() -> list[dict[str, Any]]:
        return [
            {"name": rule_set.name, "labels": rule_set.labels} for rule_set in list_rule_sets()
        ]

    @app.post("/cluster", dependencies=[Depends(require_api_key)])
    async def cluster(request: Request) -> dict[str, Any]:
        """Summary: Cluster a JSON array of chat messages.

        Importance: Primary HTTP entry point for clustering.
        Alternatives: Accept newline-delimited messages as plain text.
        """

        return _run(services.clustering.cluster, await request.body())

    @app.post("/summarize", dependencies=[Depends(require_api_key)])
    async def summarize(request: Request) -> dict[str, Any]:
        """Summary: Cluster messages and return a short digest.

        Importance: Lets dashboards show a one-glance description of the chat.
        Alternatives: Build the digest client-side from bucket counts.
        """

        return _run(services.clustering.summarize, await request.body())

    return app
