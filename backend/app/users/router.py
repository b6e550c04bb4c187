from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from ..core.database import get_session
from ..models.User import User, UserResponse, ProfileResponse, ProfileUpdate
from ..auth.service import get_current_user
from .service import find_user_by_id, update_profile

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/me", response_model=UserResponse)
def get_my_info(current_user: User = Depends(get_current_user)):
    """
    Get current user information.
    """
    return current_user

@router.put("/me", response_model=UserResponse)
def update_my_info(
    update_data: ProfileUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    """
    Updates existing information, such as the password.
    """
    return update_profile(session, current_user, update_data)

@router.get("/profile/{user_id}", response_model=ProfileResponse)
def get_user_profile(user_id: int, session: Session = Depends(get_session)):
    user = find_user_by_id(session, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user)
):
    user = find_user_by_id(session, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
