import logging

from fastapi import Request, Depends, HTTPException, status
from sqlalchemy.orm import Session
from jose import JWTError
from course_catalog.config import Settings
from course_catalog.utils.security import decode_token
from course_catalog.models.user import Role, User

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the session cookie into a stored user.

    A missing cookie is a 400 and a bad or expired token a 401. A token whose
    subject no longer exists stops the request with a 400.
    """
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Token not found")

    try:
        payload = decode_token(token, settings.secret_key)
        user_id: str = payload.get("sub")
        if user_id is None:
            raise HTTPException(status_code=401, detail="Invalid token")
    except JWTError:
        logger.info("Rejected session token on %s", request.url.path)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = db.get(User, user_id)
    if user is None:
        logger.warning("Session token refers to missing user %s", user_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user not found")

    request.state.user = user
    return user

def require_role(*roles: Role):
    allowed = frozenset(roles)

    def _check(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            logger.info("User %s with role %s denied", user.id, user.role.value)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="unauthorized")
        return user

    return _check
