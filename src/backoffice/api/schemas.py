"""Pydantic request/response schemas for the Backoffice API."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str
    password: str

    model_config = {"json_schema_extra": {"examples": [{"username": "admin", "password": "change-me-please"}]}}


class LoginResponse(BaseModel):
    token: str
    message: str = "Login successful"
