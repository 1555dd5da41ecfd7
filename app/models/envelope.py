"""
Gateway response envelope
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """Uniform wrapper for every /api/users response"""
    success: bool
    data: Optional[Any] = None
    message: str = Field(..., description="Human-readable outcome")
    error: Optional[str] = Field(None, description="Failure detail, only on errors")

    def to_content(self) -> dict:
        """JSON body with only the fields that were explicitly set"""
        return self.model_dump(exclude_unset=True)
