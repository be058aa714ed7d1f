from typing import AsyncGenerator
from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import get_db
from ..mapping import CatalogMapper
from ..service import CategoryService, ProductService
from ..unit_of_work import CatalogUnitOfWork


async def get_catalog_uow(
    db: AsyncSession = Depends(get_db)
) -> AsyncGenerator[CatalogUnitOfWork, None]:
    """Dependency: one CatalogUnitOfWork per request, closed on every exit path."""
    uow = CatalogUnitOfWork(session=db)
    try:
        yield uow
    finally:
        await uow.close()

def get_mapper(request: Request) -> CatalogMapper:
    """Dependency: the mapper built at startup."""
    return request.app.state.mapper

def get_category_service(
    uow: CatalogUnitOfWork = Depends(get_catalog_uow),
    mapper: CatalogMapper = Depends(get_mapper),
) -> CategoryService:
    return CategoryService(uow, mapper)

def get_product_service(
    uow: CatalogUnitOfWork = Depends(get_catalog_uow),
    mapper: CatalogMapper = Depends(get_mapper),
) -> ProductService:
    return ProductService(uow, mapper)
