"""
Flask routes package for dataembed.

This module handles HTTP requests and responses only.
All resolution logic is delegated to the services layer.

The single `main` Blueprint is split across feature modules. All
modules import `main` from this package and register routes on it.
"""

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, request

from dataembed.services import EmbedService
from dataembed.source.params import METHOD_PARAM, PATH_PARAM, is_reserved_key

logger = logging.getLogger(__name__)
main = Blueprint("main", __name__)


# =============================================================================
# Helper Functions (shared across all route modules)
# =============================================================================


def get_embed_service() -> EmbedService:
    """Return the app's EmbedService."""
    return current_app.extensions["embed_service"]


def request_params(source_path: str = "") -> Dict[str, Any]:
    """
    Build an invocation parameter map from the current request.

    Query arguments become params (first value wins), the routed path
    becomes the invocation path. Platform-reserved (__ow_) arguments
    are dropped so a client cannot override them.
    """
    params: Dict[str, Any] = {
        key: value
        for key, value in request.args.to_dict().items()
        if not is_reserved_key(key)
    }
    params[PATH_PARAM] = f"/{source_path}" if source_path else ""
    params[METHOD_PARAM] = request.method.lower()
    return params


# =============================================================================
# Import route modules to register their routes on the Blueprint.
# These must be at the bottom to avoid circular imports.
# =============================================================================

from dataembed.routes import (  # noqa: E402, F401
    core,
    sources,
)
