"""
Response schemas using Pydantic.

Shared by the Flask routes and the serverless action entry point.
"""

from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class SourceDescription(BaseModel):
    """A resolved and supported data source."""

    url: str = Field(description="The resolved source URL, query included")
    host: Optional[str] = None
    matcher: str = Field(description="Name of the matcher that accepted the URL")
    query: str = Field(
        default="", description="Combined query string of the invocation"
    )
    query_params: List[Tuple[str, str]] = Field(default_factory=list)


class ErrorBody(BaseModel):
    """Standardized error payload."""

    success: bool = False
    message: str
    category: str = "error"


class ActionResponse(BaseModel):
    """Serverless action result: status code, headers and JSON body."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode", ge=100, le=599)
    headers: Dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )
    body: Dict[str, Any] = Field(default_factory=dict)

    def to_action_result(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
