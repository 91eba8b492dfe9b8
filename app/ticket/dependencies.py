# app/ticket/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from app.account.models import User
from app.account.services import get_user_by_email
from app.core.config import Settings, get_settings
from app.core.errors import MisconfigurationError


class RequesterResolver:
    """Resolves the requester of new tickets from the seeded account."""

    def __init__(self, email: str, hint: str):
        self.email = email
        self.hint = hint

    def __call__(self, db: Session) -> User:
        user = get_user_by_email(db, self.email)
        if user is None:
            raise MisconfigurationError(self.hint)
        return user


def get_org_id(settings: Settings = Depends(get_settings)) -> str:
    return settings.ORG_ID


def get_requester_resolver(settings: Settings = Depends(get_settings)) -> RequesterResolver:
    return RequesterResolver(settings.SEED_REQUESTER_EMAIL, settings.SEED_HINT)
