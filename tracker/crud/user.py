import logging
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from tracker.models import User

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalar(select(User).where(User.email == email))


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.scalar(select(User).where(User.username == username))


def generate_unique_username(db: Session, base: str) -> str:
    username = base
    suffix = 1
    while db.scalar(select(User.id).where(User.username == username)) is not None:
        username = f"{base}{suffix}"
        suffix += 1
    return username


def upsert_google_user(db: Session, google_id: str, email: str, name: str, avatar_url: Optional[str]) -> User:
    """Find the user by provider id, creating it or filling in a missing username."""
    user = db.scalar(select(User).where(User.google_id == google_id))
    if user and user.username:
        return user

    username = generate_unique_username(db, email.split("@")[0])
    if user:
        user.username = username
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Assigned username %s to user %s", username, user.id)
        return user

    user = User(google_id=google_id, email=email, name=name, avatar_url=avatar_url, username=username)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s (%s)", user.id, username)
    return user


def get_profile(db: Session, username: str) -> Optional[Dict[str, Any]]:
    user = get_user_by_email(db, f"{username}@gmail.com")
    if not user:
        return None
    return {"name": user.name, "email": user.email, "avatarUrl": user.avatar_url}
