"""
SKU routes
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from inventory.api.render import respond
from inventory.core.dependencies import get_sku_service
from inventory.services.sku import SKUService

router = APIRouter(
    tags=["skus"],
    responses={404: {"description": "SKU not found"}},
)


def sku_fields(shoe, color, size, price, qty) -> dict:
    return {"shoe": shoe, "color": color, "size": size, "price": price, "qty": qty}


@router.get("/skus", summary="List SKUs")
async def sku_list(service: SKUService = Depends(get_sku_service)) -> Response:
    return await respond(service.list_all())


@router.get("/sku/create", summary="SKU create form")
async def sku_create_get(service: SKUService = Depends(get_sku_service)) -> Response:
    return await respond(service.create_get())


@router.post(
    "/sku/create",
    summary="Create SKU",
    description="Create a SKU, or redirect to the existing SKU of the same shoe, color and size.",
)
async def sku_create_post(
    shoe: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    size: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    qty: Optional[str] = Form(None),
    service: SKUService = Depends(get_sku_service),
) -> Response:
    return await respond(service.create_post(sku_fields(shoe, color, size, price, qty)))


@router.get("/sku/{sku_id}/delete", summary="SKU delete confirmation")
async def sku_delete_get(
    sku_id: str, service: SKUService = Depends(get_sku_service)
) -> Response:
    return await respond(service.delete_get(sku_id))


@router.post("/sku/{sku_id}/delete", summary="Delete SKU")
async def sku_delete_post(
    sku_id: str, service: SKUService = Depends(get_sku_service)
) -> Response:
    return await respond(service.delete_post(sku_id))


@router.get("/sku/{sku_id}/update", summary="SKU update form")
async def sku_update_get(
    sku_id: str, service: SKUService = Depends(get_sku_service)
) -> Response:
    return await respond(service.update_get(sku_id))


@router.post("/sku/{sku_id}/update", summary="Update SKU")
async def sku_update_post(
    sku_id: str,
    shoe: Optional[str] = Form(None),
    color: Optional[str] = Form(None),
    size: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    qty: Optional[str] = Form(None),
    service: SKUService = Depends(get_sku_service),
) -> Response:
    return await respond(service.update_post(sku_id, sku_fields(shoe, color, size, price, qty)))


@router.get("/sku/{sku_id}", summary="SKU detail")
async def sku_detail(
    sku_id: str, service: SKUService = Depends(get_sku_service)
) -> Response:
    return await respond(service.detail(sku_id))
