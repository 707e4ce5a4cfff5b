"""POST /v1/statement - Render a customer rental statement"""

import time
from datetime import date
from fastapi import APIRouter, Depends, Query, Request
from starlette.responses import Response

from rental_store.api.v1.schemas import StatementRequest
from rental_store.api.dependencies import get_registry, get_request_id
from rental_store.config import settings
from rental_store.domain.models import Customer, Movie
from rental_store.domain.pricing import category_for
from rental_store.rendering.registry import RendererRegistry
from rental_store.utils.date_utils import fixed_clock
from rental_store.infrastructure.observability.logging import log_statement

router = APIRouter()


@router.post("/statement")
def create_statement(
    request_body: StatementRequest,
    request: Request,
    format_name: str = Query(default=settings.default_statement_format, alias="format", description="Statement format name"),
    registry: RendererRegistry = Depends(get_registry),
):
    """
    Compute charges and points for the given rentals and render a statement.

    Flow:
    1. Build the customer and its rentals (reference date pinned if as_of given)
    2. Resolve the renderer (unknown formats fall back to plain, never an error)
    3. Render the statement view
    4. Return it with the renderer's media type
    """
    start_time = time.time()
    request_id = get_request_id(request)

    # 1. Build customer
    clock = fixed_clock(request_body.as_of) if request_body.as_of else date.today
    customer = Customer(request_body.customer_name, clock=clock, registry=registry)
    for item in request_body.rentals:
        customer.add_rental(Movie(title=item.title, category=category_for(item.category)), item.rented_at)

    # 2. Resolve renderer
    renderer = registry.resolve(format_name)

    # 3. Render (counted in rental_store_statements_total)
    body = customer.render_statement(renderer)

    # Record logs
    duration_ms = (time.time() - start_time) * 1000
    log_statement(request_id, customer.name, renderer.name, len(customer.rentals), duration_ms)

    return Response(content=body, media_type=renderer.media_type)
