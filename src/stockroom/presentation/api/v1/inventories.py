"""Inventory resource router.

Endpoints:
    GET /api/v1/inventory/{item_id} - Inventory rows of an item across spaces
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from stockroom.core.container import get_inventory_service
from stockroom.core.result import Failure, Success
from stockroom.domain.protocols import InventoryServiceProtocol
from stockroom.presentation.api.middleware.auth_dependencies import get_current_user
from stockroom.presentation.api.v1.errors import ErrorResponseBuilder
from stockroom.schemas.common_schemas import DataResponse, ErrorResponse
from stockroom.schemas.inventory_schemas import InventoryResponse

router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
)


@router.get(
    "/{item_id}",
    response_model=DataResponse[list[InventoryResponse]],
    summary="List inventory of an item",
)
async def list_item_inventory(
    item_id: Annotated[int, Path(gt=0, description="Item ID")],
    inventory_service: InventoryServiceProtocol = Depends(get_inventory_service),
) -> DataResponse[list[InventoryResponse]] | JSONResponse:
    match await inventory_service.find_by_item_id(item_id):
        case Success(value=records):
            return DataResponse(
                data=[InventoryResponse.from_domain(record) for record in records]
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
