from datetime import datetime
from loguru import logger
from pydantic import BaseModel, EmailStr, Field, model_validator
from sqlalchemy.exc import IntegrityError
from framework.security import create_access_token, get_password_hash, verify_password
from framework.exceptions.handler import BadRequestException
from .models import User
from .repository import IdentityUnitOfWork


class UserCredentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=30)


class UserRegistration(UserCredentials):
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Password and confirmation do not match.")
        return self


class UserToken(BaseModel):
    authenticated: bool
    expiration: datetime
    token: str
    message: str


class IdentityService:
    def __init__(self, uow: IdentityUnitOfWork):
        """Initialize Identity Service with UnitOfWork."""
        self.uow = uow

    async def register_user(self, data: UserRegistration) -> User:
        """Create an account; the email doubles as the user name."""
        email = data.email.lower()
        if await self.uow.users.get_by_email(email):
            raise BadRequestException("Email already registered")

        user = User(
            email=email,
            hashed_password=get_password_hash(data.password),
            email_confirmed=True
        )
        self.uow.users.add(user)
        try:
            await self.uow.commit()
        except IntegrityError:
            await self.uow.rollback()
            logger.warning(f"Email {email} already exists")
            raise BadRequestException("Email already registered")

        logger.info(f"User {email} registered")
        return user

    async def login(self, data: UserCredentials) -> UserToken:
        """Check credentials and issue a bearer token."""
        user = await self.uow.users.get_by_email(data.email)
        if user is None or not verify_password(data.password, user.hashed_password):
            logger.info(f"Invalid login for {data.email}")
            raise BadRequestException("Invalid login...")

        token, expiration = create_access_token(user.email)
        logger.info(f"User {user.email} authenticated successfully")
        return UserToken(
            authenticated=True,
            expiration=expiration,
            token=token,
            message="Token JWT OK"
        )
