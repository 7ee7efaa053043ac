"""
Brand routes
List, detail, create, update and delete pages for brands
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from inventory.api.render import respond
from inventory.core.dependencies import get_brand_service
from inventory.services.brand import BrandService

router = APIRouter(
    tags=["brands"],
    responses={404: {"description": "Brand not found"}},
)


@router.get("/brands", summary="List brands")
async def brand_list(service: BrandService = Depends(get_brand_service)) -> Response:
    return await respond(service.list_all())


@router.get("/brand/create", summary="Brand create form")
async def brand_create_get(service: BrandService = Depends(get_brand_service)) -> Response:
    return await respond(service.create_get())


@router.post(
    "/brand/create",
    summary="Create brand",
    description="Create a brand, or redirect to the existing brand with the same name.",
    responses={303: {"description": "Brand saved"}, 422: {"description": "Invalid form"}},
)
async def brand_create_post(
    name: Optional[str] = Form(None),
    desc: Optional[str] = Form(None),
    service: BrandService = Depends(get_brand_service),
) -> Response:
    return await respond(service.create_post({"name": name, "desc": desc}))


@router.get("/brand/{brand_id}/delete", summary="Brand delete confirmation")
async def brand_delete_get(
    brand_id: str, service: BrandService = Depends(get_brand_service)
) -> Response:
    return await respond(service.delete_get(brand_id))


@router.post(
    "/brand/{brand_id}/delete",
    summary="Delete brand",
    responses={303: {"description": "Brand deleted"}, 409: {"description": "Brand still has shoes"}},
)
async def brand_delete_post(
    brand_id: str, service: BrandService = Depends(get_brand_service)
) -> Response:
    return await respond(service.delete_post(brand_id))


@router.get("/brand/{brand_id}/update", summary="Brand update form")
async def brand_update_get(
    brand_id: str, service: BrandService = Depends(get_brand_service)
) -> Response:
    return await respond(service.update_get(brand_id))


@router.post(
    "/brand/{brand_id}/update",
    summary="Update brand",
    responses={303: {"description": "Brand saved"}, 422: {"description": "Invalid form"}},
)
async def brand_update_post(
    brand_id: str,
    name: Optional[str] = Form(None),
    desc: Optional[str] = Form(None),
    service: BrandService = Depends(get_brand_service),
) -> Response:
    return await respond(service.update_post(brand_id, {"name": name, "desc": desc}))


@router.get("/brand/{brand_id}", summary="Brand detail")
async def brand_detail(
    brand_id: str, service: BrandService = Depends(get_brand_service)
) -> Response:
    return await respond(service.detail(brand_id))
