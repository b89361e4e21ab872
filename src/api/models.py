"""Pydantic models for API request/response."""

from typing import Optional
from pydantic import BaseModel, Field


class AdminUser(BaseModel):
    """A user as listed by the admin users endpoint."""
    id: str
    email: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    role: Optional[str] = None
    createdAt: Optional[str] = Field(None, description="ISO-8601 creation timestamp")
    updatedAt: Optional[str] = Field(None, description="ISO-8601 last update timestamp")


class AdminUsersResponse(BaseModel):
    """Response model for GET /api/admin/all-users."""
    totalUsers: int
    users: list[AdminUser]
