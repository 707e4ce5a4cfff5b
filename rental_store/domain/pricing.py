"""Pricing engine - rental charges and loyalty points per movie category"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Dict, Protocol, Type

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Quantize an amount to two decimal places (half-up)"""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


class CategoryTag(str, Enum):
    REGULAR = "regular"
    NEW_RELEASE = "new_release"
    CHILDREN = "children"


@dataclass(frozen=True)
class Category:
    """Rate card for one movie category"""

    tag: CategoryTag
    base_price: Decimal
    extra_price: Decimal
    free_days: int  # 0 = no day limit when extra_price is 0
    base_points: int
    bonus_points: int = 0
    bonus_after_days: int = 0  # bonus applies when elapsed days exceed this

    @property
    def rule(self) -> "RateRule":
        return rate_rule_for(self)


class RateRule(Protocol):
    """Charge and points for one rental, given whole elapsed days"""

    def charge_for(self, elapsed_days: int) -> Decimal: ...

    def points_for(self, elapsed_days: int) -> int: ...


@dataclass(frozen=True)
class StandardRateRule:
    """
    Base price plus a per-day charge for every day past the free period.

    Regular: 2.00 + 1.50 per day after day 2
    Children: 1.50 + 1.50 per day after day 3
    """

    category: Category

    def charge_for(self, elapsed_days: int) -> Decimal:
        extra_days = max(0, elapsed_days - self.category.free_days)
        return to_money(self.category.base_price + self.category.extra_price * extra_days)

    def points_for(self, elapsed_days: int) -> int:
        return self.category.base_points


@dataclass(frozen=True)
class NewReleaseRateRule(StandardRateRule):
    """Flat charge; one bonus point for rentals kept longer than a day"""

    def points_for(self, elapsed_days: int) -> int:
        points = super().points_for(elapsed_days)
        if elapsed_days > self.category.bonus_after_days:
            points += self.category.bonus_points
        return points


REGULAR = Category(
    tag=CategoryTag.REGULAR,
    base_price=Decimal("2.00"),
    extra_price=Decimal("1.50"),
    free_days=2,
    base_points=1,
)

NEW_RELEASE = Category(
    tag=CategoryTag.NEW_RELEASE,
    base_price=Decimal("3.00"),
    extra_price=Decimal("0.00"),
    free_days=0,
    base_points=1,
    bonus_points=1,
    bonus_after_days=1,
)

CHILDREN = Category(
    tag=CategoryTag.CHILDREN,
    base_price=Decimal("1.50"),
    extra_price=Decimal("1.50"),
    free_days=3,
    base_points=1,
)

CATEGORIES: Dict[CategoryTag, Category] = {
    category.tag: category for category in (REGULAR, NEW_RELEASE, CHILDREN)
}

# Categories whose formulas diverge from the standard rule
RATE_RULES: Dict[CategoryTag, Type[StandardRateRule]] = {
    CategoryTag.NEW_RELEASE: NewReleaseRateRule,
}


def rate_rule_for(category: Category) -> RateRule:
    """Select the rate rule for a category by its tag"""
    rule_type = RATE_RULES.get(category.tag, StandardRateRule)
    return rule_type(category)


def category_for(tag: CategoryTag | str) -> Category:
    """Look up the rate card for a category tag"""
    return CATEGORIES[CategoryTag(tag)]
