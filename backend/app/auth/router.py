from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from ..core.database import get_session
from ..models.User import SignUpCreate, LoginRequest, UserResponse
from ..models.AuthToken import AuthResponse, TokenCheck, TokenVerification
from ..users.service import create_user, find_user_by_credentials
from .service import AuthService, get_auth_service, oauth2_scheme

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    signup_data: SignUpCreate,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    session: Session = Depends(get_session)
):
    """
    Create an account and return it together with a fresh access token.
    """
    user = create_user(session, signup_data)
    access_token = auth.issue(user)
    return AuthResponse(
        user=UserResponse.model_validate(user, from_attributes=True),
        access_token=access_token,
        token_type="bearer"
    )

@router.post("/login", response_model=AuthResponse)
def login(
    login_data: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
    session: Session = Depends(get_session)
):
    """
    Login with email and password to get an access token.
    """
    user = find_user_by_credentials(session, login_data.email, login_data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = auth.issue(user)
    return AuthResponse(
        user=UserResponse.model_validate(user, from_attributes=True),
        access_token=access_token,
        token_type="bearer"
    )

@router.post("/logout")
def logout(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth: Annotated[AuthService, Depends(get_auth_service)]
):
    """
    Revoke the presented token. Works for expired or unknown tokens as well.
    """
    auth.revoke(token)
    return {"message": "Logged out successfully"}

@router.post("/verify", response_model=TokenVerification)
def verify(
    check: TokenCheck,
    auth: Annotated[AuthService, Depends(get_auth_service)]
):
    """
    Tell whether a token is currently accepted. The reason for a rejection is never exposed.
    """
    return TokenVerification(valid=auth.validate(check.token))
