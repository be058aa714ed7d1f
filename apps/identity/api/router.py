from datetime import datetime
from typing import AsyncGenerator
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import get_db
from framework.response import ResponseModel
from ..repository import IdentityUnitOfWork
from ..service import IdentityService, UserCredentials, UserRegistration

router = APIRouter()

async def get_identity_uow(
    db: AsyncSession = Depends(get_db)
) -> AsyncGenerator[IdentityUnitOfWork, None]:
    """Dependency: create IdentityUnitOfWork, closed after the request."""
    uow = IdentityUnitOfWork(session=db)
    try:
        yield uow
    finally:
        await uow.close()

def get_identity_service(uow: IdentityUnitOfWork = Depends(get_identity_uow)) -> IdentityService:
    """Dependency: create IdentityService."""
    return IdentityService(uow)

@router.get("")
async def auth_status():
    """Liveness check for the auth endpoints."""
    return ResponseModel.success(data=f"Auth :: accessed at {datetime.now():%A, %d %B %Y}")

@router.post("/register")
async def register(
    data: UserRegistration,
    service: IdentityService = Depends(get_identity_service)
):
    """Create an account."""
    user = await service.register_user(data)
    return ResponseModel.success(data={"id": user.id, "email": user.email})

@router.post("/login")
async def login(
    data: UserCredentials,
    service: IdentityService = Depends(get_identity_service)
):
    """Login: return a bearer token."""
    token = await service.login(data)
    return ResponseModel.success(data=token)
