"""
Dependency injection for the items bounded context.

Provides FastAPI dependency functions that wire the application's
record store into use cases via constructor injection, and read
request values that may arrive either as query or form parameters.
The store itself is owned by the application (``app.state.record_store``).
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from app.application.items.create_item import CreateItemUseCase
from app.application.items.delete_item import DeleteItemUseCase
from app.application.items.get_item import GetItemUseCase
from app.application.items.list_items import ListItemsUseCase
from app.application.items.update_item import UpdateItemUseCase
from app.domain.items.ports import RecordStore


def get_record_store(request: Request) -> RecordStore:
    """Return the record store owned by the running application."""
    return request.app.state.record_store


def get_list_items_use_case() -> ListItemsUseCase:
    return ListItemsUseCase()


def get_get_item_use_case(request: Request) -> GetItemUseCase:
    """Build GetItemUseCase with the application's record store."""
    return GetItemUseCase(store=get_record_store(request))


def get_create_item_use_case(request: Request) -> CreateItemUseCase:
    """Build CreateItemUseCase with the application's record store."""
    return CreateItemUseCase(store=get_record_store(request))


def get_update_item_use_case(request: Request) -> UpdateItemUseCase:
    """Build UpdateItemUseCase with the application's record store."""
    return UpdateItemUseCase(store=get_record_store(request))


def get_delete_item_use_case(request: Request) -> DeleteItemUseCase:
    """Build DeleteItemUseCase with the application's record store."""
    return DeleteItemUseCase(store=get_record_store(request))


_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _value_error(error_type: str, loc: tuple[str, ...], msg: str) -> RequestValidationError:
    return RequestValidationError(
        [{"type": error_type, "loc": loc, "msg": msg, "input": None}]
    )


async def get_update_value(request: Request) -> str:
    """Read the new item value from the query string or a form body.

    The query string wins when both carry ``value``.

    Raises:
        RequestValidationError: If neither carries a string ``value``.
    """
    value = request.query_params.get("value")
    if value is not None:
        return value
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        value = form.get("value")
        if value is not None and not isinstance(value, str):
            raise _value_error(
                "string_type", ("body", "value"), "Input should be a valid string"
            )
    if value is None:
        raise _value_error("missing", ("query", "value"), "Field required")
    return value
