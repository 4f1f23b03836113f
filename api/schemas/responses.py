"""Response schemas for API endpoints."""
from typing import Optional
from pydantic import BaseModel, Field


class ArticleSubmitResponse(BaseModel):
    """Response schema for article submission."""
    article_id: str = Field(..., description="Identifier of the stored article")
    message: str = Field(default="Article submitted successfully")


class ErrorResponse(BaseModel):
    """Schema for error responses."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")


class HealthResponse(BaseModel):
    """Schema for the health check."""
    status: str = Field(default="healthy")
