"""
Source routes: resolve the data source of a request.

The source is given either as ?src=<url> or as the request path itself
(/https://host/...), percent-encoded or not.
"""

import logging

from flask import jsonify

from dataembed.routes import main, get_embed_service, request_params
from dataembed.services import EmbedService
from dataembed.source.params import PATH_PARAM

logger = logging.getLogger(__name__)


@main.route("/", defaults={"source_path": ""})
@main.route("/<path:source_path>")
def resolve_source(source_path):
    """Resolve the request to a supported data source."""
    params = request_params(source_path)
    logger.debug("Resolving source for path %r", params.get(PATH_PARAM))

    # SourceMissingError / UnsupportedSourceError map to 400 / 404
    target = get_embed_service().resolve(params)
    return jsonify(EmbedService.describe(target).model_dump(mode="json")), 200
