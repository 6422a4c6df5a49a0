import logging
from datetime import timedelta
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from fastapi import HTTPException, status

from .. import models
from ..auth import (
    authenticate_user as auth_authenticate_user,
    create_user as auth_create_user,
    create_access_token as auth_create_access_token,
    revoke_token as auth_revoke_token
)
from ..core.settings import get_settings
from ..schemas import SignupRequest, LoginRequest, SignupResponse, LoginResponse, LogoutResponse, UserResponse
from .store_errors import store_error_detail

logger = logging.getLogger(__name__)


class AuthService:
    """Service for handling authentication business logic."""
    
    @staticmethod
    def check_user_exists(db: Session, email: str) -> bool:
        """Check if a user with the given email already exists."""
        existing_user = db.query(models.User).filter(models.User.email == email).first()
        return existing_user is not None
    
    @staticmethod
    def create_access_token_for_user(user: models.User) -> str:
        """Create an access token for the given user."""
        settings = get_settings()
        access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
        return auth_create_access_token(
            data={"sub": user.email, "user_id": user.id},
            expires_delta=access_token_expires,
            settings=settings
        )
    
    @staticmethod
    def signup_user(db: Session, request: SignupRequest) -> SignupResponse:
        """
        Create a new user account.
        
        Args:
            db: Database session
            request: Signup request data
            
        Returns:
            SignupResponse with user and access token
            
        Raises:
            HTTPException: If email already exists or creation fails
        """
        try:
            # Check if user already exists
            if AuthService.check_user_exists(db, request.email):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Email already registered"
                )
            
            user = auth_create_user(
                db=db,
                email=request.email,
                password=request.password
            )
            
            # Create access token
            access_token = AuthService.create_access_token_for_user(user)
            logger.info(f"Signed up user {user.id}")
            
            return SignupResponse(
                user=UserResponse.model_validate(user),
                access_token=access_token,
                token_type="bearer"
            )
            
        except HTTPException:
            db.rollback()
            raise
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create account: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to create account")
            )
    
    @staticmethod
    def login_user(db: Session, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return login response.
        
        Raises:
            HTTPException: If authentication fails
        """
        user = auth_authenticate_user(db, request.email, request.password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )
        
        access_token = AuthService.create_access_token_for_user(user)
        
        return LoginResponse(
            user=UserResponse.model_validate(user),
            access_token=access_token,
            token_type="bearer"
        )

    @staticmethod
    def logout_user(db: Session, payload: dict) -> LogoutResponse:
        """Revoke the token the request was made with."""
        try:
            auth_revoke_token(db, payload)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to revoke token: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=store_error_detail(e, "Failed to sign out")
            )
        return LogoutResponse(success=True)
