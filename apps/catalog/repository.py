"""Catalog module repository implementations."""

from typing import List
from sqlalchemy.orm import selectinload
from framework.pagination import PagedList, to_paged_list
from framework.repository.base import BaseRepository
from .models import Category, Product


class CategoryRepository(BaseRepository[Category]):
    """Category repository."""

    def __init__(self, session):
        super().__init__(session, Category)

    async def get_categories(self, page_number: int, page_size: int) -> PagedList[Category]:
        """Categories ordered by id, one page."""
        statement = self.get().order_by(Category.id)
        return await to_paged_list(self.session, statement, page_number, page_size)

    async def get_categories_with_products(self, page_number: int, page_size: int) -> PagedList[Category]:
        """Categories ordered by id with their products loaded, one page."""
        statement = self.get().order_by(Category.id)
        return await to_paged_list(
            self.session, statement, page_number, page_size,
            selectinload(Category.products),
        )


class ProductRepository(BaseRepository[Product]):
    """Product repository."""

    def __init__(self, session):
        super().__init__(session, Product)

    async def get_products(self, page_number: int, page_size: int) -> PagedList[Product]:
        """Products ordered by id, one page."""
        statement = self.get().order_by(Product.id)
        return await to_paged_list(self.session, statement, page_number, page_size)

    async def get_products_by_price(self) -> List[Product]:
        """All products, cheapest first (ties broken by id)."""
        statement = self.get().order_by(Product.price, Product.id)
        result = await self.session.exec(statement)
        return list(result.all())
