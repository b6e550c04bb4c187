from datetime import datetime, timezone
from sqlmodel import Field, SQLModel
from pydantic import EmailStr

# ==========================================
# SQLModel (Database Entity + Base Pydantic)
# ==========================================
class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, nullable=False)
    email: str = Field(unique=True, index=True, nullable=False)
    hashed_password: str
    full_name: str | None = Field(default=None, nullable=True)
    phone: str | None = Field(default=None, nullable=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc).replace(microsecond=0))

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on signup
class SignUpCreate(SQLModel):
    username: str = Field(min_length=3, max_length=64)
    email: EmailStr
    password: str = Field(min_length=8)
    full_name: str | None = None
    phone: str | None = None

# Properties to receive via API on login
class LoginRequest(SQLModel):
    email: EmailStr
    password: str

# Properties to return via API
class UserResponse(SQLModel):
    id: int
    username: str
    email: str
    full_name: str | None = None
    phone: str | None = None

# Public profile, visible without a session
class ProfileResponse(SQLModel):
    username: str
    full_name: str | None = None

class ProfileUpdate(SQLModel):
    username: str | None = Field(default=None, min_length=3, max_length=64)
    full_name: str | None = None
    phone: str | None = None
    password: str | None = Field(default=None, min_length=8)
