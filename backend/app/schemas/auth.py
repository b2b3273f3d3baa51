"""Admin login request/response contracts."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    password: str = ""


class AdminOut(BaseModel):
    name: str
    email: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: AdminOut
