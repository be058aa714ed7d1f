"""
Offset pagination over an ordered select statement.
"""

import math
from typing import Any, Generic, Iterator, List, TypeVar
from fastapi import Query
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.config import settings
from framework.exceptions.handler import BadRequestException

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata sent in the X-Pagination header."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_next: bool
    has_previous: bool

    def to_header(self) -> str:
        return self.model_dump_json(by_alias=True)


class PagedList(Generic[T]):
    """One page of an ordered sequence plus the shape of the whole sequence."""

    def __init__(self, items: List[T], count: int, page_number: int, page_size: int):
        self.items = list(items)
        self.total_count = count
        self.page_size = page_size
        self.current_page = page_number
        self.total_pages = math.ceil(count / page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def metadata(self) -> PageMeta:
        return PageMeta(
            total_count=self.total_count,
            page_size=self.page_size,
            current_page=self.current_page,
            total_pages=self.total_pages,
            has_next=self.has_next,
            has_previous=self.has_previous,
        )

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self) -> str:
        return (
            f"PagedList(page={self.current_page}/{self.total_pages}, "
            f"size={self.page_size}, total={self.total_count}, items={len(self.items)})"
        )


async def to_paged_list(
    session: AsyncSession,
    statement,
    page_number: int,
    page_size: int,
    *options: Any,
) -> PagedList:
    """Materialize one page of ``statement``.

    The statement must already be ordered; without a deterministic order,
    pages are not stable between calls. Loader ``options`` (e.g. selectinload)
    apply to the page query only, not to the count.
    """
    if page_size < 1:
        raise BadRequestException(f"pageSize must be at least 1 (got {page_size})")
    if page_number < 1:
        raise BadRequestException(f"pageNumber must be at least 1 (got {page_number})")

    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    count = (await session.exec(count_statement)).one()

    page_statement = statement.offset((page_number - 1) * page_size).limit(page_size)
    if options:
        page_statement = page_statement.options(*options)
    result = await session.exec(page_statement)
    return PagedList(result.all(), count, page_number, page_size)


class PaginationParams(BaseModel):
    """Paging query parameters; page_size is capped at MAX_PAGE_SIZE."""
    page_number: int = 1
    page_size: int = settings.DEFAULT_PAGE_SIZE

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return min(value, settings.MAX_PAGE_SIZE)


def get_pagination(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
) -> PaginationParams:
    """Dependency: read pageNumber/pageSize from the query string."""
    return PaginationParams(page_number=page_number, page_size=page_size)
