"""Data models for API responses."""

from typing import Any, Dict, List

from pydantic import BaseModel

SUCCESS_STATUS = "success"

# Breed name -> ordered sub-breed names (empty when the breed has none)
BreedsMap = Dict[str, List[str]]


class ApiEnvelope(BaseModel):
    """The ``{"status": ..., "message": ...}`` wrapper of every response."""

    # Compared as-is; anything but the exact success marker is a failure
    status: Any
    message: Any
    # Only present on error responses
    code: Any = None

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS
