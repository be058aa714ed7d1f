from typing import List, Optional, Tuple
from loguru import logger
from framework.config import Settings, settings as default_settings
from framework.exceptions.handler import BadRequestException, NotFoundException
from framework.pagination import PageMeta, PaginationParams
from .mapping import CatalogMapper
from .models import Category, Product
from .schemas import CategoryDTO, CategoryWithProductsDTO, ProductDTO
from .unit_of_work import CatalogUnitOfWork
from .validation import ensure_valid, validate_category, validate_product


def _check_route_id(route_id: int, payload_id: Optional[int]):
    if route_id != payload_id:
        raise BadRequestException(
            f"The id given ({route_id}) is not the same as the id received for update ({payload_id})"
        )


class CategoryService:
    def __init__(self, uow: CatalogUnitOfWork, mapper: CatalogMapper):
        self.uow = uow
        self.mapper = mapper

    async def list_categories(self, params: PaginationParams) -> Tuple[List[CategoryDTO], PageMeta]:
        page = await self.uow.categories.get_categories(params.page_number, params.page_size)
        return self.mapper.to_category_dtos(page), page.metadata()

    async def list_categories_with_products(
        self, params: PaginationParams
    ) -> Tuple[List[CategoryWithProductsDTO], PageMeta]:
        page = await self.uow.categories.get_categories_with_products(params.page_number, params.page_size)
        return [self.mapper.to_category_with_products_dto(c) for c in page], page.metadata()

    async def _get_or_404(self, category_id: int) -> Category:
        category = await self.uow.categories.get_by_id(Category.id == category_id)
        if category is None:
            logger.info(f"Category {category_id} not found")
            raise NotFoundException(f"Category with id={category_id} not found...")
        return category

    async def get_category(self, category_id: int) -> CategoryDTO:
        return self.mapper.to_category_dto(await self._get_or_404(category_id))

    async def create_category(self, payload: Optional[CategoryDTO]) -> CategoryDTO:
        if payload is None:
            raise BadRequestException("Category payload is required")
        ensure_valid(validate_category(payload))

        category = self.mapper.to_category(payload.model_copy(update={"id": None}))
        self.uow.categories.add(category)
        await self.uow.commit()
        logger.info(f"Category {category.id} created")
        return self.mapper.to_category_dto(category)

    async def update_category(self, category_id: int, payload: Optional[CategoryDTO]) -> CategoryDTO:
        if payload is None:
            raise BadRequestException("Category payload is required")
        _check_route_id(category_id, payload.id)
        await self._get_or_404(category_id)
        ensure_valid(validate_category(payload))

        category = await self.uow.categories.update(self.mapper.to_category(payload))
        await self.uow.commit()
        logger.info(f"Category {category_id} updated")
        return self.mapper.to_category_dto(category)

    async def delete_category(self, category_id: int) -> CategoryDTO:
        category = await self._get_or_404(category_id)
        deleted = self.mapper.to_category_dto(category)

        await self.uow.categories.delete(category)
        await self.uow.commit()
        logger.info(f"Category {category_id} deleted")
        return deleted


class ProductService:
    def __init__(self, uow: CatalogUnitOfWork, mapper: CatalogMapper, settings: Settings = default_settings):
        self.uow = uow
        self.mapper = mapper
        self.settings = settings

    async def list_products(self, params: PaginationParams) -> Tuple[List[ProductDTO], PageMeta]:
        page = await self.uow.products.get_products(params.page_number, params.page_size)
        return self.mapper.to_product_dtos(page), page.metadata()

    async def list_products_by_price(self) -> List[ProductDTO]:
        return self.mapper.to_product_dtos(await self.uow.products.get_products_by_price())

    async def _get_or_404(self, product_id: int) -> Product:
        product = await self.uow.products.get_by_id(Product.id == product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
            raise NotFoundException(f"Product with id={product_id} not found...")
        return product

    async def _validate(self, payload: ProductDTO):
        ensure_valid(validate_product(payload, self.settings))
        category = await self.uow.categories.get_by_id(Category.id == payload.category_id)
        if category is None:
            raise BadRequestException(f"Category with id={payload.category_id} does not exist")

    async def get_product(self, product_id: int) -> ProductDTO:
        return self.mapper.to_product_dto(await self._get_or_404(product_id))

    async def create_product(self, payload: Optional[ProductDTO]) -> ProductDTO:
        if payload is None:
            raise BadRequestException("Product payload is required")
        await self._validate(payload)

        product = self.mapper.to_product(payload.model_copy(update={"id": None}))
        self.uow.products.add(product)
        await self.uow.commit()
        logger.info(f"Product {product.id} created in category {product.category_id}")
        return self.mapper.to_product_dto(product)

    async def update_product(self, product_id: int, payload: Optional[ProductDTO]) -> ProductDTO:
        if payload is None:
            raise BadRequestException("Product payload is required")
        _check_route_id(product_id, payload.id)
        existing = await self._get_or_404(product_id)
        await self._validate(payload)

        product = self.mapper.to_product(payload)
        if payload.registered_at is None:
            product.registered_at = existing.registered_at
        product = await self.uow.products.update(product)
        await self.uow.commit()
        logger.info(f"Product {product_id} updated")
        return self.mapper.to_product_dto(product)

    async def delete_product(self, product_id: int) -> ProductDTO:
        product = await self._get_or_404(product_id)
        deleted = self.mapper.to_product_dto(product)

        await self.uow.products.delete(product)
        await self.uow.commit()
        logger.info(f"Product {product_id} deleted")
        return deleted
