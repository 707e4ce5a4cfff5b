"""GET /v1/categories and /v1/formats - Rate card and available statement formats"""

from fastapi import APIRouter, Depends

from rental_store.api.v1.schemas import CategoriesResponse, CategorySchema, FormatsResponse
from rental_store.api.dependencies import get_registry
from rental_store.domain.pricing import CATEGORIES
from rental_store.rendering.registry import RendererRegistry

router = APIRouter()


@router.get("/categories", response_model=CategoriesResponse)
def list_categories():
    """Rate card for every pricing category"""
    return CategoriesResponse(
        categories=[
            CategorySchema(
                tag=category.tag,
                base_price=category.base_price,
                extra_price=category.extra_price,
                free_days=category.free_days,
                base_points=category.base_points,
                bonus_points=category.bonus_points,
                bonus_after_days=category.bonus_after_days,
            )
            for category in CATEGORIES.values()
        ]
    )


@router.get("/formats", response_model=FormatsResponse)
def list_formats(registry: RendererRegistry = Depends(get_registry)):
    """Registered statement formats and the fallback used for unknown names"""
    return FormatsResponse(formats=registry.formats, fallback=registry.fallback_name)
