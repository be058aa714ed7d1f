"""Entity <-> transfer object conversion for the catalog."""

from typing import Iterable, List
from .models import Category, Product
from .schemas import CategoryDTO, CategoryWithProductsDTO, ProductDTO


class CatalogMapper:
    """Stateless converter; one instance is created at startup and injected."""

    def to_category_dto(self, category: Category) -> CategoryDTO:
        return CategoryDTO.model_validate(category)

    def to_category_with_products_dto(self, category: Category) -> CategoryWithProductsDTO:
        # products must be eager-loaded; async sessions cannot lazy-load here
        return CategoryWithProductsDTO(
            id=category.id,
            name=category.name,
            image_url=category.image_url,
            products=self.to_product_dtos(category.products),
        )

    def to_category_dtos(self, categories: Iterable[Category]) -> List[CategoryDTO]:
        return [self.to_category_dto(c) for c in categories]

    def to_category(self, dto: CategoryDTO) -> Category:
        return Category(id=dto.id, name=dto.name, image_url=dto.image_url)

    def to_product_dto(self, product: Product) -> ProductDTO:
        return ProductDTO.model_validate(product)

    def to_product_dtos(self, products: Iterable[Product]) -> List[ProductDTO]:
        return [self.to_product_dto(p) for p in products]

    def to_product(self, dto: ProductDTO) -> Product:
        data = dto.model_dump(exclude_none=True)
        return Product(**data)
