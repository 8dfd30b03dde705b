# api/deps.py
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from db.session import SessionLocal
from core import security
from core.config import settings
from core.errors import Unauthorized
from models.identity import CallerIdentity
from services.interview_service import InterviewAccessService


# tokens come from the external identity provider; auto_error=False so each
# operation decides whether a missing identity is an error
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_caller_identity(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[CallerIdentity]:
    return security.identity_from_token(token)


def require_caller_identity(
    caller: Optional[CallerIdentity] = Depends(get_caller_identity),
) -> CallerIdentity:
    # resolved before the request body is validated, so anonymous callers
    # get 401 rather than field-level validation errors
    if caller is None:
        raise Unauthorized()
    return caller


def get_interview_service(db: Session = Depends(get_db)) -> InterviewAccessService:
    return InterviewAccessService(db, status_allowlist=settings.interview_status_allowlist)
