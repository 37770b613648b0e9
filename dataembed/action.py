"""
Serverless action entry point.

The platform calls main() with the flat invocation parameter map and
expects a {statusCode, headers, body} result.
"""

import logging
from typing import Any, Dict, Optional

from config import Config
from dataembed.schemas import ActionResponse, ErrorBody
from dataembed.services import (
    EmbedService,
    SourceMissingError,
    UnsupportedSourceError,
)

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> ActionResponse:
    return ActionResponse(
        status_code=status_code,
        body=ErrorBody(message=message).model_dump(),
    )


def main(
    params: Dict[str, Any], service: Optional[EmbedService] = None
) -> Dict[str, Any]:
    """
    Resolve the data source of one invocation.

    Args:
        params: The invocation parameters.
        service: EmbedService to use; built from Config when omitted.

    Returns:
        The action result: 200 with the source description, 400 when no
        source URL was given, 404 when the source is not supported.
    """
    if service is None:
        service = EmbedService(enabled_matchers=Config.ENABLED_MATCHERS)

    try:
        target = service.resolve(params)
    except SourceMissingError as e:
        logger.warning(f"Missing data source: {e}")
        return error_response(str(e), 400).to_action_result()
    except UnsupportedSourceError as e:
        logger.info(f"Unsupported data source: {e}")
        return error_response(str(e), 404).to_action_result()

    description = EmbedService.describe(target)
    return ActionResponse(
        status_code=200, body=description.model_dump(mode="json")
    ).to_action_result()
