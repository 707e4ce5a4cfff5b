"""Domain models - movies, rentals and the customer aggregate"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from rental_store.config import settings
from rental_store.domain.pricing import Category, to_money
from rental_store.domain.statement import StatementLine, StatementView
from rental_store.infrastructure.observability.metrics import record_statement
from rental_store.rendering.base import MoneyFormat, StatementRenderer
from rental_store.rendering.registry import RendererRegistry, default_registry
from rental_store.utils.date_utils import Clock, elapsed_days


@dataclass(frozen=True)
class Movie:
    """A title and the category it is priced under"""

    title: str
    category: Category

    @property
    def price(self) -> Decimal:
        """Unit price shown on statements (category base price)"""
        return self.category.base_price


@dataclass(frozen=True)
class Rental:
    """A movie rented on a calendar date"""

    movie: Movie
    rented_at: date

    def days_rented(self, as_of: Optional[date] = None) -> int:
        return elapsed_days(self.rented_at, as_of or date.today())

    def total_amount(self, as_of: Optional[date] = None) -> Decimal:
        """Amount owed as of the reference date (default: today)"""
        return self.movie.category.rule.charge_for(self.days_rented(as_of))

    def rental_points(self, as_of: Optional[date] = None) -> int:
        """Loyalty points earned as of the reference date (default: today)"""
        return self.movie.category.rule.points_for(self.days_rented(as_of))


class Customer:
    """
    Owns an append-only, ordered list of rentals.

    The reference date used for elapsed days comes from ``clock`` so that
    statements are reproducible; it defaults to the system date.
    """

    def __init__(
        self,
        name: str,
        clock: Clock = date.today,
        registry: Optional[RendererRegistry] = None,
    ):
        self._name = name
        self._rentals: List[Rental] = []
        self.clock = clock
        self.registry = registry or default_registry()

    @property
    def name(self) -> str:
        return self._name

    @property
    def rentals(self) -> Tuple[Rental, ...]:
        return tuple(self._rentals)

    def add_rental(self, movie: Movie, rented_at: date) -> Rental:
        rental = Rental(movie=movie, rented_at=rented_at)
        self._rentals.append(rental)
        return rental

    def total_amount(self, as_of: Optional[date] = None) -> Decimal:
        as_of = as_of or self.clock()
        return to_money(sum((r.total_amount(as_of) for r in self._rentals), Decimal("0")))

    def total_rental_points(self, as_of: Optional[date] = None) -> int:
        as_of = as_of or self.clock()
        return sum(r.rental_points(as_of) for r in self._rentals)

    def statement_view(self, as_of: Optional[date] = None) -> StatementView:
        """Project current rentals into a statement view, evaluated on one date"""
        as_of = as_of or self.clock()
        lines = tuple(
            StatementLine(
                title=rental.movie.title,
                unit_price=rental.movie.price,
                owed_amount=rental.total_amount(as_of),
                rented_at=rental.rented_at,
            )
            for rental in self._rentals
        )
        return StatementView(
            customer_name=self.name,
            as_of=as_of,
            lines=lines,
            total_amount=self.total_amount(as_of),
            total_points=self.total_rental_points(as_of),
        )

    def statement(self, format_name: Optional[str] = None, money: Optional[MoneyFormat] = None) -> str:
        """
        Render a statement in the requested format.

        Unknown format names fall back to plain text (see RendererRegistry.resolve),
        so this never fails on the selector. Only ``None`` means "use the default
        format"; an empty name is unknown and falls back with a warning.
        """
        if format_name is None:
            format_name = settings.default_statement_format
        return self.render_statement(self.registry.resolve(format_name), money)

    def render_statement(self, renderer: StatementRenderer, money: Optional[MoneyFormat] = None) -> str:
        """Render with an already-resolved renderer and count it under that renderer's name"""
        text = renderer.render(self.statement_view(), money or MoneyFormat.from_settings())
        record_statement(renderer.name)
        return text
