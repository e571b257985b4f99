"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    success: bool = Field(
        False,
        description="Always false for errors",
    )
    data: None = Field(
        None,
        description="Always null for errors",
    )
    error: str = Field(
        ...,
        description="Error code",
        examples=["CONTRACT_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Contract not found: 42"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "data": None,
                    "error": "CONTRACT_NOT_FOUND",
                    "message": "Contract not found: 42",
                    "request_id": "abc123",
                }
            ]
        }
    }
