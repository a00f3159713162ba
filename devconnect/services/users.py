# devconnect/services/users.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from devconnect.errors import DuplicateEmail, Internal, InvalidCredentials, UserNotFound, ValidationFailed
from devconnect.middleware.auth_middleware import JwtStrategy
from devconnect.models import User
from devconnect.schemas.users import TokenOut, UserOut
from devconnect.security import DEFAULT_ROUNDS, hash_password, verify_password
from devconnect.utils.avatar import gravatar_url
from devconnect.validation.login import validate_login_input
from devconnect.validation.register import validate_register_input

logger = logging.getLogger(__name__)


def _norm_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == _norm_email(email)).first()


def register_user(db: Session, data: Mapping[str, Any], rounds: int = DEFAULT_ROUNDS) -> UserOut:
    """
    Create an account.

    Raises:
      ValidationFailed on bad input, DuplicateEmail if the email is taken.
    """
    errors, is_valid = validate_register_input(data)
    if not is_valid:
        raise ValidationFailed(errors)

    email = _norm_email(data["email"])
    if get_user_by_email(db, email):
        raise DuplicateEmail()

    user = User(
        name=data["name"].strip(),
        email=email,
        avatar=gravatar_url(email),
        password_hash=hash_password(data["password"], rounds=rounds),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration
        db.rollback()
        raise DuplicateEmail()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save user: %s", e)
        raise Internal()
    db.refresh(user)

    logger.info("Registered user id=%s", user.id)
    return UserOut.model_validate(user)


def login_user(db: Session, strategy: JwtStrategy, data: Mapping[str, Any]) -> TokenOut:
    errors, is_valid = validate_login_input(data)
    if not is_valid:
        raise ValidationFailed(errors)

    user = get_user_by_email(db, data["email"])
    if user is None:
        raise UserNotFound()

    if not verify_password(data["password"], user.password_hash):
        logger.warning("Failed login for user id=%s", user.id)
        raise InvalidCredentials()

    token = strategy.issue(user)
    logger.info("User id=%s logged in", user.id)
    return TokenOut(success=True, token=f"Bearer {token}")
