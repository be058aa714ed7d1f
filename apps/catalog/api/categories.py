from typing import Optional
from fastapi import APIRouter, Body, Depends, Request, Response, status
from framework.logging.logger import get_logger
from framework.pagination import PaginationParams, get_pagination
from framework.response import ResponseModel
from ..schemas import CategoryDTO
from ..service import CategoryService
from .deps import get_category_service

router = APIRouter()

@router.get("")
async def list_categories(
    response: Response,
    params: PaginationParams = Depends(get_pagination),
    service: CategoryService = Depends(get_category_service)
):
    """Categories ordered by id; paging metadata in the X-Pagination header."""
    get_logger("categories").info(f"GET categories page={params.page_number} size={params.page_size}")
    categories, meta = await service.list_categories(params)
    response.headers["X-Pagination"] = meta.to_header()
    return ResponseModel.success(data=categories)

@router.get("/produtos")
async def list_categories_with_products(
    response: Response,
    params: PaginationParams = Depends(get_pagination),
    service: CategoryService = Depends(get_category_service)
):
    """Categories with their products nested."""
    categories, meta = await service.list_categories_with_products(params)
    response.headers["X-Pagination"] = meta.to_header()
    return ResponseModel.success(data=categories)

@router.get("/{category_id}")
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    get_logger("categories").info(f"GET category id={category_id}")
    category = await service.get_category(category_id)
    return ResponseModel.success(data=category)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    request: Request,
    response: Response,
    payload: Optional[CategoryDTO] = Body(None),
    service: CategoryService = Depends(get_category_service)
):
    """Create a category; Location points at the new resource."""
    category = await service.create_category(payload)
    response.headers["Location"] = str(request.url_for("get_category", category_id=category.id))
    return ResponseModel.success(data=category, code=201)

@router.put("/{category_id}")
async def update_category(
    category_id: int,
    payload: Optional[CategoryDTO] = Body(None),
    service: CategoryService = Depends(get_category_service)
):
    """Full update; the body id must match the route id."""
    category = await service.update_category(category_id, payload)
    return ResponseModel.success(data=category)

@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category and its products; returns what was deleted."""
    category = await service.delete_category(category_id)
    return ResponseModel.success(data=category)
