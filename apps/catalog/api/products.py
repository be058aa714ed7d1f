from typing import Optional
from fastapi import APIRouter, Body, Depends, Request, Response, status
from framework.logging.logger import log_action
from framework.pagination import PaginationParams, get_pagination
from framework.response import ResponseModel
from framework.security import get_current_user
from ..schemas import ProductDTO
from ..service import ProductService
from .deps import get_product_service

# Every product route requires a bearer token
router = APIRouter(dependencies=[Depends(get_current_user), Depends(log_action)])

@router.get("")
async def list_products(
    response: Response,
    params: PaginationParams = Depends(get_pagination),
    service: ProductService = Depends(get_product_service)
):
    """Products ordered by id; paging metadata in the X-Pagination header."""
    products, meta = await service.list_products(params)
    response.headers["X-Pagination"] = meta.to_header()
    return ResponseModel.success(data=products)

@router.get("/menorpreco")
async def list_products_by_price(
    service: ProductService = Depends(get_product_service)
):
    """All products, cheapest first."""
    products = await service.list_products_by_price()
    return ResponseModel.success(data=products)

@router.get("/{product_id}")
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    product = await service.get_product(product_id)
    return ResponseModel.success(data=product)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    response: Response,
    payload: Optional[ProductDTO] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    product = await service.create_product(payload)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return ResponseModel.success(data=product, code=201)

@router.put("/{product_id}")
async def update_product(
    product_id: int,
    payload: Optional[ProductDTO] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    product = await service.update_product(product_id, payload)
    return ResponseModel.success(data=product)

@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    product = await service.delete_product(product_id)
    return ResponseModel.success(data=product)
