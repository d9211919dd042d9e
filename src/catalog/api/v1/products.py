"""Product management API endpoints.

Every response is wrapped in the ``{success, message, data?}`` envelope.
Failures are raised as ``catalog.core.exceptions`` errors and rendered by the
handlers in ``catalog.api.errors``.
"""

from fastapi import APIRouter, status

from catalog.api.deps import ProductId, ProductServiceDep
from catalog.middleware.metrics import record_product_mutation
from catalog.schemas.common import DataResponse, MessageResponse
from catalog.schemas.product import ProductCreate, ProductResponse, ProductUpdate

router = APIRouter()


@router.get("", response_model=DataResponse[list[ProductResponse]])
async def list_products(service: ProductServiceDep):
    """Get all products."""
    products = await service.list_all()
    return DataResponse[list[ProductResponse]](
        message="Products retrieved successfully",
        data=[ProductResponse.model_validate(p) for p in products],
    )


@router.get("/{product_id}", response_model=DataResponse[ProductResponse])
async def get_product(product_id: ProductId, service: ProductServiceDep):
    """Get product by ID."""
    product = await service.get_or_404(product_id)
    return DataResponse[ProductResponse](
        message="Product retrieved successfully",
        data=ProductResponse.model_validate(product),
    )


@router.post(
    "",
    response_model=DataResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_product(product_data: ProductCreate, service: ProductServiceDep):
    """Create a new product."""
    with record_product_mutation("create"):
        product = await service.create(product_data)
    return DataResponse[ProductResponse](
        message="Product created successfully",
        data=ProductResponse.model_validate(product),
    )


@router.put("/{product_id}", response_model=DataResponse[ProductResponse])
async def update_product(
    product_id: ProductId,
    product_data: ProductUpdate,
    service: ProductServiceDep,
):
    """Update the supplied fields of a product."""
    with record_product_mutation("update"):
        product = await service.update(product_id, product_data)
    return DataResponse[ProductResponse](
        message="Product updated successfully",
        data=ProductResponse.model_validate(product),
    )


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: ProductId, service: ProductServiceDep):
    """Permanently delete a product."""
    with record_product_mutation("delete"):
        await service.delete(product_id)
    return MessageResponse(success=True, message="Product deleted successfully")
