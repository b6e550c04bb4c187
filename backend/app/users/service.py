from fastapi import HTTPException
from sqlmodel import Session, select

from ..core.logging import get_logger
from ..core.security import get_password_hash, verify_password
from ..models.User import User, SignUpCreate, ProfileUpdate

logger = get_logger("users.service")

def create_user(session: Session, user: SignUpCreate) -> User:
    statement = select(User).where(User.email == user.email)
    db_user = session.exec(statement).first()
    if db_user:
        raise HTTPException(status_code=400, detail="Email already registered")

    statement = select(User).where(User.username == user.username)
    db_user = session.exec(statement).first()
    if db_user:
        raise HTTPException(status_code=400, detail="Username already registered")

    db_user = User(
        username=user.username,
        email=user.email,
        hashed_password=get_password_hash(user.password),
        full_name=user.full_name,
        phone=user.phone,
    )
    session.add(db_user)
    session.commit()
    session.refresh(db_user)
    logger.info("user_created", user_id=db_user.id)
    return db_user

def find_user_by_id(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)

def find_user_by_credentials(session: Session, email: str, password: str) -> User | None:
    statement = select(User).where(User.email == email)
    user = session.exec(statement).first()
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user

def update_profile(session: Session, user: User, update_data: ProfileUpdate) -> User:
    if update_data.username is not None and update_data.username != user.username:
        statement = select(User).where(User.username == update_data.username)
        if session.exec(statement).first():
            raise HTTPException(status_code=400, detail="Username already registered")
        user.username = update_data.username

    if update_data.full_name is not None:
        user.full_name = update_data.full_name

    if update_data.phone is not None:
        user.phone = update_data.phone

    if update_data.password is not None:
        user.hashed_password = get_password_hash(update_data.password)

    session.add(user)
    session.commit()
    session.refresh(user)
    return user
