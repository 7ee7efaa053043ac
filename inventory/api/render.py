"""
Turns workflow results into HTTP responses.

Views are rendered as JSON documents ``{"view": ..., "data": {...}}``;
ORM entities in the data bag are serialized through their response
schema, skipping relationships that were not loaded with them.

Reference: https://fastapi.tiangolo.com/advanced/custom-response/
"""
import logging
from typing import Any, Awaitable

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from inventory.api.schemas.brand import BrandResponse
from inventory.api.schemas.category import CategoryResponse
from inventory.api.schemas.shoe import ShoeResponse
from inventory.api.schemas.sku import SKUResponse
from inventory.core.exceptions import NotFoundError
from inventory.models import SKU, Base, Brand, Category, Shoe
from inventory.services.results import DependencyConflict, Redirect, Result, ValidationFailed

logger = logging.getLogger(__name__)

RESPONSE_SCHEMAS: dict[type, type[BaseModel]] = {
    Brand: BrandResponse,
    Category: CategoryResponse,
    Shoe: ShoeResponse,
    SKU: SKUResponse,
}


def to_payload(value: Any) -> Any:
    """Replace ORM entities and schemas in a data bag value with plain data."""
    if isinstance(value, Base):
        schema = RESPONSE_SCHEMAS[type(value)]
        unloaded = inspect(value).unloaded
        fields = {
            name: to_payload(getattr(value, name))
            for name in schema.model_fields
            if name not in unloaded
        }
        return schema.model_validate(fields).model_dump(mode="json")
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {key: to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


def render(result: Result) -> Response:
    """
    Status codes:
        200 view, 422 rejected form, 409 blocked delete, 303 redirect
    """
    if isinstance(result, Redirect):
        return RedirectResponse(result.target, status_code=status.HTTP_303_SEE_OTHER)

    status_code = status.HTTP_200_OK
    if isinstance(result, ValidationFailed):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif isinstance(result, DependencyConflict):
        status_code = status.HTTP_409_CONFLICT

    return JSONResponse(
        jsonable_encoder({"view": result.view, "data": to_payload(result.data)}),
        status_code=status_code,
    )


async def respond(operation: Awaitable[Result]) -> Response:
    """
    Run a workflow operation and render its result.

    Raises:
        HTTPException: 404 for a missing entity, 500 for a store failure
    """
    try:
        result = await operation
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except SQLAlchemyError as e:
        logger.error(f"Store failure: {type(e).__name__}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected database error occurred",
        ) from e
    return render(result)
