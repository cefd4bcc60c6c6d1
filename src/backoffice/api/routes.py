"""FastAPI routes for the Backoffice domain: admin login."""

from fastapi import APIRouter, HTTPException, status
from shared.auth import issue_token

from backoffice.admin.accounts import authenticate
from backoffice.api.schemas import LoginRequest, LoginResponse

admin_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> LoginResponse:
    admin = authenticate(body.username, body.password)
    if admin is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return LoginResponse(token=issue_token(str(admin.id), admin.username))
