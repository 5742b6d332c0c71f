"""
Employee API — Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the API contract for the employee endpoints.
How:   FastAPI decodes request bodies into these models (rejecting malformed
       payloads with 422), serializes responses through them and generates
       the OpenAPI docs from them.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class EmployeeCreate(BaseModel):
    """
    What:  Body of POST /employees.
    Both fields are required; the store assigns the id.
    """
    name: str = Field(description="Employee name", examples=["Ada"])
    salary: float = Field(description="Employee salary", examples=[9000])


class EmployeeUpdate(BaseModel):
    """
    What:  Body of PATCH/PUT /employees/{id}.

    Every field is optional. An omitted field (or an explicit null) leaves
    the stored column unchanged; it never clears it.
    """
    name: Optional[str] = Field(default=None, description="New name, if changing")
    salary: Optional[float] = Field(default=None, description="New salary, if changing")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    What:  One employee row as returned by every read/write endpoint.
    Salary is always rendered as a JSON number, whatever numeric type the
    driver hands back (Decimal for NUMERIC columns).
    """
    id: int = Field(description="Store-assigned employee identifier")
    name: Optional[str] = Field(default=None, description="Employee name")
    salary: Optional[float] = Field(default=None, description="Employee salary")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {
            "error": "not_found",
            "message": "Employee not found",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
