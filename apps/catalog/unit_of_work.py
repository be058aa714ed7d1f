from sqlmodel.ext.asyncio.session import AsyncSession
from framework.repository.unit_of_work import UnitOfWork
from .repository import CategoryRepository, ProductRepository


class CatalogUnitOfWork(UnitOfWork):
    """Category and product repositories bound to one session; commit() writes both."""

    def __init__(self, session: AsyncSession):
        super().__init__(session=session)
        self.categories = CategoryRepository(self.session)
        self.products = ProductRepository(self.session)
