"""HTTP entrypoint exposing the ZIP-based business search."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from flask import Flask, current_app, jsonify, request

from solar_finder.core.config import get_settings
from solar_finder.core.errors import SearchError
from solar_finder.search.query import build_query
from solar_finder.search.service import SearchService, build_search_service

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_KEY = "search_service"


def create_app(service: Optional[SearchService] = None) -> Flask:
    app = Flask(__name__)
    app.extensions[SERVICE_KEY] = service or build_search_service()

    # ---------- Routes ----------

    @app.get("/healthz")
    def healthcheck() -> Any:
        """Lightweight health endpoint; reports which providers are configured."""
        search_service: SearchService = current_app.extensions[SERVICE_KEY]
        return (
            jsonify(
                {
                    "status": "ok",
                    "providers": [
                        provider.vendor
                        for provider in search_service.orchestrator.providers
                        if provider.is_configured
                    ],
                    "cached_entries": len(search_service.cache),
                    "revision": os.getenv("K_REVISION", "unknown"),
                }
            ),
            200,
        )

    @app.get("/search")
    @app.get("/api/search")
    def search() -> Any:
        """
        Search nearby businesses for a ZIP code.
        Query params: code (or zip), radiusMiles (float, default 10), limit (int, default 10, max 50)
        """
        search_service: SearchService = current_app.extensions[SERVICE_KEY]
        code = request.args.get("code")
        if code is None:
            code = request.args.get("zip")

        try:
            query = build_query(code, request.args.get("radiusMiles"), request.args.get("limit"))
            response = search_service.execute(query)
        except SearchError as exc:
            logger.warning("Search rejected for code=%s: %s", code, exc)
            return jsonify({"error": str(exc)}), exc.status_code
        except Exception as exc:  # noqa: BLE001
            logger.exception("Search failed for code=%s: %s", code, exc)
            return jsonify({"error": "server error"}), 500

        return jsonify(response.to_dict()), 200

    return app


def main() -> None:
    settings = get_settings()
    env_port = os.getenv("PORT")
    logger.info("[BOOT] ENV PORT=%s", env_port)

    port = settings.port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)

    app = create_app(build_search_service(settings))
    app.run(host="0.0.0.0", port=port, threaded=True)


if __name__ == "__main__":
    main()
