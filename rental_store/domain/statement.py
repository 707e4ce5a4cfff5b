"""Statement view - read-only projection of a customer's rentals for rendering"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class StatementLine:
    """One rental as shown on a statement"""

    title: str
    unit_price: Decimal
    owed_amount: Decimal
    rented_at: date


@dataclass(frozen=True)
class StatementView:
    """
    Everything a renderer needs, computed once per statement request.

    Renderers only lay this out. Amounts and points are never recomputed
    from here, and the view is never cached on the customer.
    """

    customer_name: str
    as_of: date
    lines: Tuple[StatementLine, ...]
    total_amount: Decimal
    total_points: int
