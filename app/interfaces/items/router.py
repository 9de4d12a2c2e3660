"""
FastAPI router for the items bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Failures are rendered by the centralized error handlers; expected
outcomes (not found, conflict) are rendered here as plain text.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.application.items.create_item import CreateItemUseCase
from app.application.items.delete_item import DeleteItemUseCase
from app.application.items.dtos import (
    CreateItemCommand,
    DeleteItemCommand,
    GetItemQuery,
    ItemResult,
    UpdateItemCommand,
)
from app.application.items.get_item import GetItemUseCase
from app.application.items.list_items import ListItemsUseCase
from app.application.items.update_item import UpdateItemUseCase
from app.domain.items.entities import Outcome
from app.interfaces.items.dependencies import (
    get_create_item_use_case,
    get_delete_item_use_case,
    get_get_item_use_case,
    get_list_items_use_case,
    get_update_item_use_case,
    get_update_value,
)
from app.interfaces.items.schemas import CreateItemRequest, ErrorPayload

router = APIRouter(tags=["items"])

OUTCOME_STATUS = {
    Outcome.OK: 200,
    Outcome.CREATED: 201,
    Outcome.NOT_FOUND: 404,
    Outcome.CONFLICT: 409,
}

_ERROR_RESPONSES = {
    400: {"model": ErrorPayload},
    500: {"model": ErrorPayload},
}


def _to_response(result: ItemResult) -> PlainTextResponse:
    """Render a use case result as a plain-text HTTP response."""
    return PlainTextResponse(
        content=result.body, status_code=OUTCOME_STATUS[result.outcome]
    )


@router.get(
    "/items",
    response_class=PlainTextResponse,
    summary="List items",
    description="Returns a fixed placeholder; the store is not read.",
)
def list_items(
    use_case: ListItemsUseCase = Depends(get_list_items_use_case),
) -> PlainTextResponse:
    return _to_response(use_case.execute())


@router.get(
    "/items/{item_id}",
    response_class=PlainTextResponse,
    responses=_ERROR_RESPONSES,
    summary="Get an item",
)
def get_item(
    item_id: int,
    use_case: GetItemUseCase = Depends(get_get_item_use_case),
) -> PlainTextResponse:
    """Return the stored value for item_id, or 404."""
    return _to_response(use_case.execute(GetItemQuery(item_id=item_id)))


@router.post(
    "/items",
    response_class=PlainTextResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Create an item",
)
def create_item(
    request: CreateItemRequest,
    use_case: CreateItemUseCase = Depends(get_create_item_use_case),
) -> PlainTextResponse:
    """Store firstName under id, or 409 if id is taken."""
    command = CreateItemCommand(item_id=request.id, first_name=request.first_name)
    return _to_response(use_case.execute(command))


@router.put(
    "/items/{item_id}",
    response_class=PlainTextResponse,
    responses=_ERROR_RESPONSES,
    summary="Update an item",
)
def update_item(
    item_id: int,
    value: str = Depends(get_update_value),
    use_case: UpdateItemUseCase = Depends(get_update_item_use_case),
) -> PlainTextResponse:
    """Overwrite the value of an existing item, or 404.

    ``value`` is read from the query string or a form-encoded body.
    """
    command = UpdateItemCommand(item_id=item_id, value=value)
    return _to_response(use_case.execute(command))


@router.delete(
    "/items/{item_id}",
    response_class=PlainTextResponse,
    responses=_ERROR_RESPONSES,
    summary="Delete an item",
)
def delete_item(
    item_id: int,
    use_case: DeleteItemUseCase = Depends(get_delete_item_use_case),
) -> PlainTextResponse:
    return _to_response(use_case.execute(DeleteItemCommand(item_id=item_id)))
