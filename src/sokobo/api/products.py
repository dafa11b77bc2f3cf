"""Product catalogue endpoints."""

from fastapi import APIRouter, Depends, Response

from sokobo.api.dependencies import ADMIN_ONLY, product_service
from sokobo.api.schemas import (
    AddImageRequest,
    AddSizeRequest,
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from sokobo.catalogue.services import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


def _product(product) -> ProductResponse:
    return ProductResponse.model_validate(product.to_dict())


@router.get("", response_model=list[ProductResponse])
async def list_products(
    category: str | None = None,
    featured: bool = False,
    products: ProductService = Depends(product_service),
) -> list[ProductResponse]:
    return [_product(p) for p in products.list_products(category=category, featured=featured)]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, products: ProductService = Depends(product_service)) -> ProductResponse:
    return _product(products.get(product_id))


@router.post("", status_code=201, response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def create_product(
    body: CreateProductRequest,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.create(**body.model_dump()))


@router.put("/{product_id}", response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.update(product_id, **body.model_dump(exclude_unset=True)))


@router.delete("/{product_id}", status_code=204, dependencies=ADMIN_ONLY)
async def delete_product(
    product_id: str,
    products: ProductService = Depends(product_service),
) -> Response:
    products.delete(product_id)
    return Response(status_code=204)


@router.post("/{product_id}/images", response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def add_product_image(
    product_id: str,
    body: AddImageRequest,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.add_image(product_id, body.url))


@router.delete("/{product_id}/images/{index}", response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def remove_product_image(
    product_id: str,
    index: int,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.remove_image(product_id, index))


@router.put("/{product_id}/images/{index}/primary", response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def make_primary_image(
    product_id: str,
    index: int,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.move_image(product_id, index, 0))


@router.post("/{product_id}/sizes", response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def add_product_size(
    product_id: str,
    body: AddSizeRequest,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.add_size(product_id, body.size))


@router.delete("/{product_id}/sizes/{index}", response_model=ProductResponse, dependencies=ADMIN_ONLY)
async def remove_product_size(
    product_id: str,
    index: int,
    products: ProductService = Depends(product_service),
) -> ProductResponse:
    return _product(products.remove_size(product_id, index))
