from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from sqlmodel import SQLModel, Field

from .User import UserResponse

class IdentityClaims(BaseModel):
    """Identity facts bound into a session token."""
    model_config = ConfigDict(frozen=True)

    user_id: int # "sub" claim, serialized as a string
    email: str
    name: str
    signup_id: Optional[int] = None # Correlates the token with the signup record

class TokenRecord(SQLModel, table=True):
    __tablename__ = "auth_tokens"

    value: str = Field(primary_key=True, description="Exact serialized token string.")
    owner_id: int = Field(index=True)
    issued_at: datetime
    expires_at: datetime # Always equal to the "exp" claim inside the token
    revoked: bool = Field(default=False)

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

class AuthResponse(SQLModel):
    user: UserResponse
    access_token: str # JWT Token
    token_type: str = "bearer"

class TokenCheck(SQLModel):
    token: str

class TokenVerification(SQLModel):
    valid: bool
