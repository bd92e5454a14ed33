from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

JWT_ALGORITHM = "HS256"

def validate_password_strength(password: str) -> str:
    """
    Basic password strength rules:
    - Minimum length: 8 characters
    - Must contain at least one lowercase letter, one uppercase letter, and one digit
    """
    if password is None:
        raise ValueError("Password cannot be empty")

    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters long")

    has_lower = any(c.islower() for c in password)
    has_upper = any(c.isupper() for c in password)
    has_digit = any(c.isdigit() for c in password)

    if not (has_lower and has_upper and has_digit):
        raise ValueError(
            "Password must include at least one uppercase letter, one lowercase letter, and one number"
        )

    return password

def _truncate_password_for_bcrypt(password: str) -> str:
    """
    bcrypt only looks at the first 72 bytes; cut there without splitting a
    UTF-8 character.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= 72:
        return password

    # a character cut in half at the boundary is dropped by the decoder
    return password_bytes[:72].decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
    return pwd_context.hash(_truncate_password_for_bcrypt(password))

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(_truncate_password_for_bcrypt(password), password_hash)

def create_access_token(*, secret: str, user_id: int, username: str, expires_minutes: int = 60) -> str:
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)

def decode_access_token(*, secret: str, token: str) -> dict[str, Any]:
    # raises jwt.PyJWTError subclasses if invalid/expired
    return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
