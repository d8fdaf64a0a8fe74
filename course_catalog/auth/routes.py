from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from course_catalog.auth.deps import get_db, get_settings
from course_catalog.auth.service import register_user, login_user, issue_session, clear_session
from course_catalog.config import Settings
from course_catalog.schemas.auth import SignUpIn, LoginIn, MessageOut

router = APIRouter(prefix="/api/user", tags=["user"])

@router.post("/signup", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignUpIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = register_user(db, body.name, body.email, body.password, body.confirm_password, body.role)
    issue_session(response, user.id, settings)
    return MessageOut(message="user successfully register")

@router.post("/login", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def login(
    body: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = login_user(db, body.email, body.password)
    issue_session(response, user.id, settings)
    return MessageOut(message="user login successfully")

@router.post("/logout", response_model=MessageOut)
def logout(response: Response, settings: Settings = Depends(get_settings)):
    clear_session(response, settings)
    return MessageOut(message="user logout succesfully")
