"""
Shoe routes, including the inventory home page
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from inventory.api.render import respond
from inventory.core.dependencies import get_shoe_service
from inventory.services.shoe import ShoeService

router = APIRouter(
    tags=["shoes"],
    responses={404: {"description": "Shoe not found"}},
)


@router.get(
    "/",
    summary="Inventory home",
    description="Counts of shoes, SKUs, SKUs in stock, brands and categories.",
)
async def index(service: ShoeService = Depends(get_shoe_service)) -> Response:
    return await respond(service.index())


@router.get("/shoes", summary="List shoes")
async def shoe_list(service: ShoeService = Depends(get_shoe_service)) -> Response:
    return await respond(service.list_all())


@router.get("/shoe/create", summary="Shoe create form")
async def shoe_create_get(service: ShoeService = Depends(get_shoe_service)) -> Response:
    return await respond(service.create_get())


@router.post(
    "/shoe/create",
    summary="Create shoe",
    description="Create a shoe, or redirect to the existing shoe with the same name and brand.",
)
async def shoe_create_post(
    name: Optional[str] = Form(None),
    brand: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    desc: Optional[str] = Form(None),
    service: ShoeService = Depends(get_shoe_service),
) -> Response:
    return await respond(
        service.create_post({"name": name, "brand": brand, "category": category, "desc": desc})
    )


@router.get("/shoe/{shoe_id}/delete", summary="Shoe delete confirmation")
async def shoe_delete_get(
    shoe_id: str, service: ShoeService = Depends(get_shoe_service)
) -> Response:
    return await respond(service.delete_get(shoe_id))


@router.post("/shoe/{shoe_id}/delete", summary="Delete shoe")
async def shoe_delete_post(
    shoe_id: str, service: ShoeService = Depends(get_shoe_service)
) -> Response:
    return await respond(service.delete_post(shoe_id))


@router.get("/shoe/{shoe_id}/update", summary="Shoe update form")
async def shoe_update_get(
    shoe_id: str, service: ShoeService = Depends(get_shoe_service)
) -> Response:
    return await respond(service.update_get(shoe_id))


@router.post("/shoe/{shoe_id}/update", summary="Update shoe")
async def shoe_update_post(
    shoe_id: str,
    name: Optional[str] = Form(None),
    brand: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    desc: Optional[str] = Form(None),
    service: ShoeService = Depends(get_shoe_service),
) -> Response:
    return await respond(
        service.update_post(
            shoe_id, {"name": name, "brand": brand, "category": category, "desc": desc}
        )
    )


@router.get("/shoe/{shoe_id}", summary="Shoe detail")
async def shoe_detail(
    shoe_id: str, service: ShoeService = Depends(get_shoe_service)
) -> Response:
    return await respond(service.detail(shoe_id))
