"""
Category routes
"""
from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from inventory.api.render import respond
from inventory.core.dependencies import get_category_service
from inventory.services.category import CategoryService

router = APIRouter(
    tags=["categories"],
    responses={404: {"description": "Category not found"}},
)


@router.get("/categories", summary="List categories")
async def category_list(service: CategoryService = Depends(get_category_service)) -> Response:
    return await respond(service.list_all())


@router.get("/category/create", summary="Category create form")
async def category_create_get(service: CategoryService = Depends(get_category_service)) -> Response:
    return await respond(service.create_get())


@router.post(
    "/category/create",
    summary="Create category",
    description="Create a category, or redirect to the existing one with the same gender and style.",
)
async def category_create_post(
    gender: Optional[str] = Form(None),
    style: Optional[str] = Form(None),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    return await respond(service.create_post({"gender": gender, "style": style}))


@router.get("/category/{category_id}/delete", summary="Category delete confirmation")
async def category_delete_get(
    category_id: str, service: CategoryService = Depends(get_category_service)
) -> Response:
    return await respond(service.delete_get(category_id))


@router.post("/category/{category_id}/delete", summary="Delete category")
async def category_delete_post(
    category_id: str, service: CategoryService = Depends(get_category_service)
) -> Response:
    return await respond(service.delete_post(category_id))


@router.get("/category/{category_id}/update", summary="Category update form")
async def category_update_get(
    category_id: str, service: CategoryService = Depends(get_category_service)
) -> Response:
    return await respond(service.update_get(category_id))


@router.post("/category/{category_id}/update", summary="Update category")
async def category_update_post(
    category_id: str,
    gender: Optional[str] = Form(None),
    style: Optional[str] = Form(None),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    return await respond(service.update_post(category_id, {"gender": gender, "style": style}))


@router.get("/category/{category_id}", summary="Category detail")
async def category_detail(
    category_id: str, service: CategoryService = Depends(get_category_service)
) -> Response:
    return await respond(service.detail(category_id))
