"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD endpoints over the in-memory product catalog.

Status Codes:
------------
- GET    /products          200 paged result
- GET    /products/{id}     200 product, 404
- POST   /products          201 {"id": ...}, 400
- PUT    /products/{id}     200 product, 404, 400
- PATCH  /products/{id}     200 product, 404, 400
- DELETE /products/{id}     204, 404

==============================================================================
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, Response, status
from pydantic import ValidationError

from app.core import exceptions
from app.core.dependencies import get_pagination, get_product_service
from app.schemas.product import ProductCreatedResponse, ProductFields
from app.services.product_service import ProductService
from app.services.results import ProductResult, ProductStatus


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller translating service results into response bodies."""

    def __init__(self, service: ProductService):
        self._service = service

    @staticmethod
    def _unwrap(result: ProductResult) -> ProductResult:
        """Raise the matching AppException for a failed result."""
        if result.status == ProductStatus.NOT_FOUND:
            raise exceptions.product_not_found(result.product_id)
        if result.status == ProductStatus.INVALID_INPUT:
            raise exceptions.invalid_product(result.missing_fields)
        return result

    def _existing_fields(self, product_id: str, payload: Any) -> ProductFields:
        """
        Validate an update body for a product that must already exist.

        Existence is checked first, so an unknown id is a 404 whatever the
        body holds.
        """
        if not self._service.exists(product_id):
            raise exceptions.product_not_found(product_id)
        try:
            return ProductFields.model_validate(payload)
        except ValidationError as e:
            raise exceptions.invalid_input(e.errors())

    def list_products(
        self,
        category: Optional[str],
        discount: Optional[str],
        pagination: Dict[str, Optional[str]]
    ) -> dict:
        """List products with category filter, discount and pagination."""
        paged = self._service.list_products(
            category=category,
            discount_code=discount,
            page=pagination["page"],
            limit=pagination["limit"],
        )
        return paged.model_dump()

    def get_product(self, product_id: str, discount: Optional[str]) -> dict:
        """Get one product view."""
        result = self._unwrap(self._service.get_product(product_id, discount))
        return result.product.model_dump()

    def create_product(self, fields: ProductFields) -> dict:
        """Create a product and return its id."""
        result = self._unwrap(self._service.create_product(fields))
        return ProductCreatedResponse(id=result.product_id).model_dump()

    def replace_product(self, product_id: str, payload: Any) -> dict:
        """Replace a product."""
        fields = self._existing_fields(product_id, payload)
        result = self._unwrap(self._service.replace_product(product_id, fields))
        return result.product.model_dump()

    def patch_product(self, product_id: str, payload: Any) -> dict:
        """Partially update a product."""
        fields = self._existing_fields(product_id, payload)
        result = self._unwrap(self._service.patch_product(product_id, fields))
        return result.product.model_dump()

    def delete_product(self, product_id: str) -> None:
        """Delete a product."""
        self._unwrap(self._service.delete_product(product_id))


@router.get("")
async def list_products(
    category: Optional[str] = Query(None),
    discount: Optional[str] = Query(None),
    pagination: Dict[str, Optional[str]] = Depends(get_pagination),
    service: ProductService = Depends(get_product_service)
):
    """List products with optional category filter, discount and pagination."""
    controller = ProductController(service)
    return controller.list_products(category, discount, pagination)


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    discount: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service)
):
    """Get a product by id, discounted when a known code is given."""
    controller = ProductController(service)
    return controller.get_product(product_id, discount)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    fields: ProductFields,
    service: ProductService = Depends(get_product_service)
):
    """Create a product from category, name and price."""
    controller = ProductController(service)
    return controller.create_product(fields)


@router.put("/{product_id}")
async def replace_product(
    product_id: str,
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Replace a product with the supplied fields."""
    controller = ProductController(service)
    return controller.replace_product(product_id, payload)


@router.patch("/{product_id}")
async def patch_product(
    product_id: str,
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Update the supplied non-empty category, name and price values."""
    controller = ProductController(service)
    return controller.patch_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    controller = ProductController(service)
    controller.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
