import logging

from fastapi import HTTPException, Response, status
from sqlalchemy.orm import Session
from course_catalog.config import Settings
from course_catalog.models.user import Role, User
from course_catalog.utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)

def issue_session(response: Response, user_id: str, settings: Settings) -> str:
    token = create_access_token(user_id, settings.secret_key, settings.access_token_expire_minutes)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        samesite="strict",
        secure=settings.cookie_secure,
        path="/",
        max_age=settings.access_token_expire_minutes * 60,
    )
    return token

def clear_session(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        settings.auth_cookie_name,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.cookie_secure,
    )

def register_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    confirm_password: str,
    role: Role = Role.user,
) -> User:
    if password != confirm_password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="password does not match")
    if db.query(User).filter(User.email == email).first():
        logger.info("Sign-up rejected, email already registered: %s", email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user already exists")
    user = User(name=name, email=email, password_hash=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.role.value)
    return user

def login_user(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user does not exists")
    if not verify_password(password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="password does not match")
    return user
