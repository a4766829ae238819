"""
Noteful Backend: Shared Pydantic Schemas
=========================================

What:  The camelCase base model, the error envelope and the health payload.

Wire format:
    Python attributes are snake_case; JSON keys are camelCase
    (folder_id ↔ folderId, created_at ↔ createdAt). Request bodies are
    accepted in either spelling.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "conflict",
            "message": "The tag name already exists",
            "details": {"entity": "tag"},
            "request_id": "9f1c2ab4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


def sent_fields(body: Optional[BaseModel]) -> dict:
    """
    Keys the client actually sent, as snake_case attribute names.

    A request with no body yields {}, so required-field checks in the
    services report the missing field by name.
    """
    if body is None:
        return {}
    return body.model_dump(exclude_unset=True)
