# services/security.py
import hashlib
import hmac
import os
from datetime import timedelta
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from synthdata.config import settings
from synthdata.dependencies import get_db
from synthdata.models.auth import User
from synthdata.schemas.auth import TokenData, UserCreate
from synthdata.utils.helpers import utcnow

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

PBKDF2_ITERATIONS = 100_000
SALT_BYTES = 16


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _pbkdf2(password: str, salt: bytes) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS).hex()


def get_password_hash(password: str) -> str:
    """Salted PBKDF2-SHA256, stored as hex salt followed by hex digest."""
    salt = os.urandom(SALT_BYTES)
    return salt.hex() + _pbkdf2(password, salt)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    salt_hex, digest = hashed_password[:SALT_BYTES * 2], hashed_password[SALT_BYTES * 2:]
    return hmac.compare_digest(_pbkdf2(plain_password, bytes.fromhex(salt_hex)), digest)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def create_user(db: Session, user: UserCreate) -> User:
    db_user = User(email=user.email.lower(), hashed_password=get_password_hash(user.password), is_active=True)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if user and user.is_active and verify_password(password, user.hashed_password):
        return user
    return None


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    expires_delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {**data, "exp": utcnow() + expires_delta}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """Resolves the bearer token to an active user or answers 401."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Session expired, please sign in again")
    except jwt.PyJWTError:
        raise _unauthorized("Could not validate credentials")

    token_data = TokenData(email=payload.get("sub"))
    user = get_user_by_email(db, token_data.email) if token_data.email else None
    if user is None or not user.is_active:
        raise _unauthorized("Could not validate credentials")
    return user
