"""
Pydantic Schemas for API Request/Response Models
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict


# ==================== Response Models ====================

class EmployeeRecord(BaseModel):
    """Stored employee record"""
    id: int = Field(..., description="Server-assigned identifier")
    name: str
    dept: str = Field(..., description="IT, Finance or Security")
    active: bool
    number: str = Field(..., description="1-10 digits, kept as text")
    email: str
    address: str
    photo: str = Field(..., description="Data URL (data:image/...;base64,...)")


class ErrorResponse(BaseModel):
    """Error envelope used by every failing endpoint"""
    error: str


class HealthResponse(BaseModel):
    """API health check response"""
    status: str
    version: str
    employees: int


# ==================== Request Models ====================

class EmployeePayload(BaseModel):
    """
    Employee fields sent on create/update.

    Values are untyped here; models.validation decides what is acceptable.
    """
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    dept: Any = None
    active: Any = None
    number: Any = None
    email: Any = None
    address: Any = None
    photo: Any = None

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump()
