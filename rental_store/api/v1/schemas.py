"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from rental_store.domain.pricing import CategoryTag


class RentalItem(BaseModel):
    """Single rental line in a statement request"""

    title: str = Field(..., min_length=1, description="Movie title")
    category: CategoryTag = Field(..., description="Pricing category tag")
    rented_at: date = Field(..., description="Calendar date the movie was rented")


class StatementRequest(BaseModel):
    """Request body for POST /v1/statement"""

    customer_name: str = Field(..., min_length=1, description="Customer name shown on the statement")
    rentals: List[RentalItem] = Field(default_factory=list, description="Rentals in display order")
    as_of: Optional[date] = Field(None, description="Reference date for elapsed days (default: today)")


class CategorySchema(BaseModel):
    """Rate card for one category"""

    tag: CategoryTag
    base_price: Decimal
    extra_price: Decimal
    free_days: int
    base_points: int
    bonus_points: int
    bonus_after_days: int


class CategoriesResponse(BaseModel):
    """Response for GET /v1/categories"""

    categories: List[CategorySchema]


class FormatsResponse(BaseModel):
    """Response for GET /v1/formats"""

    formats: List[str]
    fallback: str
