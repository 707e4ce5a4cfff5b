"""Unit tests for per-category charges and loyalty points"""

import pytest
from dataclasses import replace
from decimal import Decimal
from rental_store.domain.pricing import (
    CHILDREN,
    NEW_RELEASE,
    REGULAR,
    CategoryTag,
    NewReleaseRateRule,
    StandardRateRule,
    category_for,
    rate_rule_for,
    to_money,
)


def test_regular_within_free_days():
    """Test base price only for the first two days"""
    rule = REGULAR.rule
    assert rule.charge_for(0) == Decimal("2.00")
    assert rule.charge_for(1) == Decimal("2.00")
    assert rule.charge_for(2) == REGULAR.base_price


def test_regular_charges_extra_days():
    """Test 1.50 per day past day 2"""
    rule = REGULAR.rule
    assert rule.charge_for(3) == Decimal("3.50")
    assert rule.charge_for(5) == REGULAR.base_price + 3 * REGULAR.extra_price  # 6.50


def test_children_charges_extra_days():
    """Test base price through day 3, then 1.50 per day"""
    rule = CHILDREN.rule
    assert rule.charge_for(3) == CHILDREN.base_price
    assert rule.charge_for(4) == Decimal("3.00")
    assert rule.charge_for(5) == CHILDREN.base_price + 2 * CHILDREN.extra_price  # 4.50


def test_new_release_flat_charge():
    """Test new releases cost the same however long they are kept"""
    rule = NEW_RELEASE.rule
    for days in (0, 1, 2, 10, 1000):
        assert rule.charge_for(days) == Decimal("3.00")


def test_new_release_bonus_point():
    """Test extra point only for rentals longer than one day"""
    rule = NEW_RELEASE.rule
    assert rule.points_for(0) == 1
    assert rule.points_for(1) == 1
    assert rule.points_for(2) == 2
    assert rule.points_for(30) == 2


def test_standard_points_constant():
    """Test regular and children rentals always earn one point"""
    for category in (REGULAR, CHILDREN):
        assert category.rule.points_for(0) == 1
        assert category.rule.points_for(50) == 1


def test_negative_days_clamped():
    """Test negative elapsed days never reduce the charge below base price"""
    for category in (REGULAR, NEW_RELEASE, CHILDREN):
        assert category.rule.charge_for(-5) == category.base_price
    assert NEW_RELEASE.rule.points_for(-5) == 1


@pytest.mark.parametrize("category", [REGULAR, NEW_RELEASE, CHILDREN], ids=lambda c: c.tag.value)
def test_charge_monotonic_in_days(category):
    """Test charges never decrease as rentals are kept longer"""
    charges = [category.rule.charge_for(days) for days in range(0, 30)]
    assert charges == sorted(charges)


def test_rule_selected_by_tag():
    """Test only new releases get the bonus-point rule"""
    assert isinstance(rate_rule_for(NEW_RELEASE), NewReleaseRateRule)
    assert type(rate_rule_for(REGULAR)) is StandardRateRule
    assert type(rate_rule_for(CHILDREN)) is StandardRateRule


def test_new_category_from_constants_only():
    """Test a category with different constants needs no new rule"""
    premium = replace(REGULAR, base_price=Decimal("4.00"), extra_price=Decimal("2.25"), free_days=1)
    assert premium.rule.charge_for(1) == Decimal("4.00")
    assert premium.rule.charge_for(3) == Decimal("8.50")


def test_category_for_accepts_tag_or_string():
    assert category_for(CategoryTag.CHILDREN) is CHILDREN
    assert category_for("new_release") is NEW_RELEASE
    with pytest.raises(ValueError):
        category_for("documentary")


def test_to_money_rounds_half_up():
    assert to_money("1.005") == Decimal("1.01")
    assert to_money(3) == Decimal("3.00")
