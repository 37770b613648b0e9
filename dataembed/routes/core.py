"""
Core routes: health check and matcher listing.
"""

from datetime import datetime, timezone

from flask import jsonify

from dataembed.routes import main, get_embed_service
from dataembed.services import MatcherRegistry


@main.route("/health")
def health():
    """Health check endpoint for Docker and monitoring."""
    return (
        jsonify({
            "status": "healthy",
            "timestamp": datetime.now(
                timezone.utc
            ).isoformat(),
        }),
        200,
    )


@main.route("/matchers")
def matchers():
    """List the data source matchers and whether each is enabled."""
    enabled = set(get_embed_service().enabled_matchers)
    return jsonify({
        "matchers": [
            {**info, "enabled": info["name"] in enabled}
            for info in MatcherRegistry.list_matchers()
        ],
    })
