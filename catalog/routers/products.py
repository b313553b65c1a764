"""
Storefront product API routes.
"""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.core.config import settings
from catalog.core.database import DbSession
from catalog.core.exceptions import (
    DatabaseUnavailableError,
    ImageNotFoundError,
    ProductNotFoundError,
)
from catalog.core.logging import get_logger
from catalog.models.price import Price
from catalog.models.product import Product
from catalog.schemas.asset import ImageResponse, ProductImagesResponse
from catalog.schemas.product import (
    PaginatedProductsResponse,
    PriceResponse,
    ProductCountResponse,
    ProductResponse,
)
from catalog.services.catalog_service import CatalogService

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

CURRENCY_PATTERN = "^[A-Za-z]{3}$"
COUNTRY_PATTERN = "^[A-Za-z]{2}$"


async def get_catalog_service(session: DbSession) -> CatalogService:
    """Dependency to get the catalog service."""
    if session is None:
        raise DatabaseUnavailableError()
    return CatalogService(session)


def _product_response(product: Product, price: Optional[Price]) -> ProductResponse:
    master = product.master
    return ProductResponse(
        id=product.id,
        name=product.name,
        slug=product.slug,
        description=product.description,
        available_on=product.available_on,
        discontinue_on=product.discontinue_on,
        master_sku=master.sku if master else None,
        price=PriceResponse.model_validate(price) if price else None,
    )


@router.get("", response_model=PaginatedProductsResponse)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: int = Query(1, ge=1, le=settings.max_page, description="Page number"),
    per_page: int = Query(
        settings.default_per_page,
        ge=1,
        le=settings.max_per_page,
        alias="perPage",
        description="Items per page",
    ),
    currency: str = Query(settings.default_currency, pattern=CURRENCY_PATTERN),
    country: Optional[str] = Query(None, pattern=COUNTRY_PATTERN, description="Country price override"),
) -> PaginatedProductsResponse:
    """
    Get a page of products currently on sale in a currency.

    `total` counts every available product; `pageCount` counts the ones on
    this page.
    """
    result = await service.product_page(
        currency.upper(),
        page=page,
        per_page=per_page,
        country_iso=country,
    )

    return PaginatedProductsResponse(
        items=[_product_response(p, result.prices.get(p.id)) for p in result.products],
        total=result.total,
        page_count=result.page_count,
        page=page,
        per_page=per_page,
        has_more=result.has_more,
    )


@router.get("/count", response_model=ProductCountResponse)
async def count_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: int = Query(1, ge=1, le=settings.max_page, description="Page number"),
    per_page: int = Query(
        settings.default_per_page,
        ge=1,
        le=settings.max_per_page,
        alias="perPage",
    ),
    currency: str = Query(settings.default_currency, pattern=CURRENCY_PATTERN),
    country: Optional[str] = Query(None, pattern=COUNTRY_PATTERN),
) -> ProductCountResponse:
    """Count the available products on one page."""
    count = await service.count_page(
        currency.upper(),
        page=page,
        per_page=per_page,
        country_iso=country,
    )
    return ProductCountResponse(
        count=count,
        page=page,
        per_page=per_page,
        currency=currency.upper(),
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    currency: str = Query(settings.default_currency, pattern=CURRENCY_PATTERN),
    country: Optional[str] = Query(None, pattern=COUNTRY_PATTERN),
) -> ProductResponse:
    """Get a product with its master price."""
    try:
        product, price = await service.product_detail(product_id, currency, country)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return _product_response(product, price)


@router.get("/{product_id}/image", response_model=ImageResponse)
async def get_product_image(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ImageResponse:
    """Get the first image of a product."""
    try:
        image = await service.first_image(product_id)
    except (ProductNotFoundError, ImageNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ImageResponse.from_asset(image)


@router.get("/{product_id}/images", response_model=ProductImagesResponse)
async def list_product_images(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductImagesResponse:
    """Get every image of a product in display order."""
    try:
        images = await service.images(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ProductImagesResponse(
        product_id=product_id,
        items=[ImageResponse.from_asset(image) for image in images],
    )
