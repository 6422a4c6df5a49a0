import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional
from passlib.context import CryptContext
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from .models import User, RevokedToken
from .db import get_db
from .core.settings import Settings, get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None, settings: Optional[Settings] = None):
    """Create JWT access token."""
    settings = settings or get_settings()
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=15)
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
    encoded_jwt = jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)
    return encoded_jwt

def verify_token(token: str, settings: Optional[Settings] = None) -> Optional[dict]:
    """Verify JWT token and return payload."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return payload
    except JWTError:
        return None

def is_token_revoked(db: Session, jti: Optional[str]) -> bool:
    """Check whether a token identifier was invalidated by sign-out."""
    if not jti:
        return False
    return db.query(RevokedToken).filter(RevokedToken.jti == jti).first() is not None

def revoke_token(db: Session, payload: dict) -> None:
    """Record a token's identifier so it is rejected from now on."""
    jti = payload.get("jti")
    if not jti or is_token_revoked(db, jti):
        return
    exp = payload.get("exp")
    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None
    db.add(RevokedToken(jti=jti, expires_at=expires_at))
    db.commit()

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate user with email and password."""
    user = db.query(User).filter(User.email == email).first()
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user

def create_user(db: Session, email: str, password: str) -> User:
    """Create a new user account."""
    user = User(
        email=email,
        password_hash=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    
    return user


# JWT Authentication
security = HTTPBearer(auto_error=False)

def authentication_required() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required",
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> dict:
    """Decode the bearer token of the current request, rejecting revoked ones"""
    if credentials is None:
        raise authentication_required()

    payload = verify_token(credentials.credentials, settings)
    if payload is None or payload.get("sub") is None:
        raise authentication_required()

    if is_token_revoked(db, payload.get("jti")):
        raise authentication_required()

    return payload

def get_current_user(
    payload: dict = Depends(get_token_payload),
    db: Session = Depends(get_db)
) -> User:
    """Get current authenticated user from JWT token"""
    email: str = payload.get("sub")
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        raise authentication_required()
    
    return user
