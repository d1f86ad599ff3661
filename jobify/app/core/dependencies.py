"""
Dependency injection utilities
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from jobify.app.core.config import settings
from jobify.app.core.exceptions import AuthRedirect
from jobify.app.core.logging_config import get_logger
from jobify.app.db.session import SessionLocal
from jobify.app.models.user import User

logger = get_logger("core.auth")
security = HTTPBearer(auto_error=False)


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def authenticate(credentials: HTTPAuthorizationCredentials | None, db: Session) -> User:
    """
    Resolve the caller from the bearer token.
    Raises AuthRedirect (sent to the public entry page) when there is no usable identity.
    """
    if not credentials:
        raise AuthRedirect()
    try:
        payload = jwt.decode(
            credentials.credentials, settings.secret_key, algorithms=[settings.algorithm]
        )
    except JWTError:
        logger.info("Rejected invalid or expired token")
        raise AuthRedirect("Invalid or expired token")
    user_id = payload.get("sub")
    if not user_id or not str(user_id).isdigit():
        raise AuthRedirect("Invalid token")
    user = db.query(User).filter(User.id == int(user_id)).first()
    if not user or not user.is_active:
        logger.info("Token subject has no active user user_id=%s", user_id)
        raise AuthRedirect("User not found")
    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from JWT"""
    return authenticate(credentials, db)


def get_current_user_id(current_user: User = Depends(get_current_user)) -> int:
    """Owner identity used to scope every job query"""
    return current_user.id
