"""Items resource router.

Endpoints:
    GET    /api/v1/items                 - List items of a space
    GET    /api/v1/items/{id}            - Get item
    POST   /api/v1/items                 - Create item
    PUT    /api/v1/items/{id}            - Update item
    DELETE /api/v1/items/{id}            - Soft delete item
    POST   /api/v1/items/{id}/inventory  - Propagate item to child spaces

All endpoints require a Bearer access token.
"""

from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse

from stockroom.core.container import get_inventory_service, get_item_repository
from stockroom.core.errors import NotFoundError
from stockroom.core.result import Failure, Success
from stockroom.domain.entities import ItemQuery, ItemStatus
from stockroom.domain.protocols import (
    InventoryServiceProtocol,
    ItemRepositoryProtocol,
)
from stockroom.presentation.api.middleware.auth_dependencies import get_current_user
from stockroom.presentation.api.v1.errors import ErrorResponseBuilder
from stockroom.schemas.common_schemas import (
    DataResponse,
    ErrorResponse,
    SuccessResponse,
)
from stockroom.schemas.item_schemas import (
    CommerceItemResponse,
    ItemCreateRequest,
    ItemResponse,
    ItemUpdateRequest,
    ItemWithInventoriesResponse,
    PropagationResponse,
)

router = APIRouter(
    prefix="/items",
    tags=["Items"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
)

ItemId = Annotated[int, Path(gt=0, description="Item ID")]


def _not_found(item_id: int) -> JSONResponse:
    return ErrorResponseBuilder.from_domain_error(
        NotFoundError(resource="Item", resource_id=str(item_id))
    )


LIST_RESPONSE_MODEL = DataResponse[
    list[ItemResponse] | list[ItemWithInventoriesResponse] | list[CommerceItemResponse]
]

# Wire names of sortable fields -> ItemQuery.sort_by keys
_SORT_KEYS = {"id": "id", "name": "name", "price": "price", "createdAt": "created_at"}


@router.get(
    "",
    # The body shape depends on the query, so the union is documented only.
    response_model=None,
    responses={200: {"model": LIST_RESPONSE_MODEL}},
    summary="List items",
)
async def list_items(
    space_id: Annotated[int, Query(alias="spaceId", gt=0)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    search: Annotated[str | None, Query(max_length=191)] = None,
    item_status: Annotated[ItemStatus, Query(alias="status")] = ItemStatus.ACTIVE,
    sort_by: Annotated[
        Literal["id", "name", "price", "createdAt"], Query(alias="sortBy")
    ] = "id",
    sort_order: Annotated[Literal["asc", "desc"], Query(alias="sortOrder")] = "asc",
    with_inventories: Annotated[bool, Query(alias="withInventories")] = False,
    list_type: Annotated[
        Literal["dashboard", "commerce"], Query(alias="type")
    ] = "dashboard",
    items: ItemRepositoryProtocol = Depends(get_item_repository),
    inventory_service: InventoryServiceProtocol = Depends(get_inventory_service),
) -> DataResponse[Any] | JSONResponse:
    """List live items of a space, filtered, sorted and paginated.

    ``type=commerce`` returns the reduced storefront view and takes
    precedence over ``withInventories``, which embeds each item's inventory
    rows.
    """
    query = ItemQuery(
        space_id=space_id,
        page=page,
        limit=limit,
        search=search or None,
        status=item_status,
        sort_by=_SORT_KEYS[sort_by],
        sort_order=sort_order,
    )
    match await items.find_all(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=found):
            pass

    if list_type == "commerce":
        return DataResponse(
            data=[CommerceItemResponse.from_domain(item) for item in found]
        )
    if not with_inventories:
        return DataResponse(data=[ItemResponse.from_domain(item) for item in found])

    entries: list[ItemWithInventoriesResponse] = []
    for item in found:
        match await inventory_service.find_by_item_id(item.id):
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(error)
            case Success(value=records):
                entries.append(
                    ItemWithInventoriesResponse.from_domain_with_inventories(
                        item, records
                    )
                )
    return DataResponse(data=entries)


@router.get(
    "/{item_id}",
    response_model=DataResponse[ItemResponse],
    responses={404: {"description": "Item not found", "model": ErrorResponse}},
    summary="Get item",
)
async def get_item(
    item_id: ItemId,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> DataResponse[ItemResponse] | JSONResponse:
    match await items.find_by_id(item_id):
        case Success(value=None):
            return _not_found(item_id)
        case Success(value=item):
            return DataResponse(data=ItemResponse.from_domain(item))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=DataResponse[ItemResponse],
    responses={400: {"description": "Validation failed", "model": ErrorResponse}},
    summary="Create item",
)
async def create_item(
    data: ItemCreateRequest,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> DataResponse[ItemResponse] | JSONResponse:
    match await items.create(data.to_values()):
        case Success(value=item):
            return DataResponse(data=ItemResponse.from_domain(item))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.put(
    "/{item_id}",
    response_model=DataResponse[ItemResponse],
    responses={404: {"description": "Item not found", "model": ErrorResponse}},
    summary="Update item",
)
async def update_item(
    item_id: ItemId,
    data: ItemUpdateRequest,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> DataResponse[ItemResponse] | JSONResponse:
    match await items.update(item_id, data.to_changes()):
        case Success(value=item):
            return DataResponse(data=ItemResponse.from_domain(item))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.delete(
    "/{item_id}",
    response_model=SuccessResponse,
    responses={404: {"description": "Item not found", "model": ErrorResponse}},
    summary="Delete item",
)
async def delete_item(
    item_id: ItemId,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> SuccessResponse | JSONResponse:
    match await items.delete(item_id):
        case Success():
            return SuccessResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/{item_id}/inventory",
    response_model=DataResponse[PropagationResponse],
    responses={404: {"description": "Item not found", "model": ErrorResponse}},
    summary="Propagate item to child spaces",
)
async def propagate_inventory(
    item_id: ItemId,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
    inventory_service: InventoryServiceProtocol = Depends(get_inventory_service),
) -> DataResponse[PropagationResponse] | JSONResponse:
    """Give every descendant of the item's space an inventory row for it.

    Spaces that already hold the item are left untouched; ``updatedCount``
    is the number of rows created.
    """
    match await items.find_by_id(item_id):
        case Success(value=None):
            return _not_found(item_id)
        case Success(value=item):
            pass
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)

    match await inventory_service.propagate_to_child_spaces(item.for_propagation()):
        case Success(value=result):
            return DataResponse(data=PropagationResponse.from_domain(result))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
