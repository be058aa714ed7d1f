from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
import sqlalchemy as sa
from sqlmodel import SQLModel, Field, Relationship


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored by DATETIME columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Category(SQLModel, table=True):
    """Product category; owns its products."""
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    image_url: str = Field(max_length=300)

    # Deleting a category deletes its products (required foreign key)
    products: List["Product"] = Relationship(
        back_populates="category",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Product.id"},
    )


class Product(SQLModel, table=True):
    """Catalog product."""
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    description: str = Field(max_length=300)
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=4)
    image_url: str = Field(max_length=300)
    stock: float = Field(default=0)
    registered_at: datetime = Field(
        default_factory=utcnow,
        sa_type=sa.DateTime(),
        description="Registration timestamp (UTC)"
    )

    category_id: int = Field(foreign_key="categories.id", index=True, ondelete="CASCADE")
    category: Optional[Category] = Relationship(back_populates="products")
