"""Width-based rate derivation and order pricing off the 44 inch benchmark rate."""
import math
from typing import Iterable

from roll_pricing.models.pricing import OrderLineRequest, OrderTotals, PricedLine, PricedOrder

REFERENCE_WIDTH_INCHES = 44.0


def _positive(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def round_half_up(value: float) -> float:
    # Same result as Math.round, including values just below .5
    whole = math.floor(value)
    if value - whole >= 0.5:
        whole += 1
    return float(whole)


def derive_rate(
    benchmark_rate_44: float | None,
    target_width_inches: float | None,
    reference_width: float = REFERENCE_WIDTH_INCHES,
) -> float:
    """Returns 0 until both the rate and the width are positive."""
    if not _positive(benchmark_rate_44) or not _positive(target_width_inches):
        return 0.0
    if not _positive(reference_width):
        return 0.0

    return round_half_up(benchmark_rate_44 * (target_width_inches / reference_width))


def price_line(
    benchmark_rate_44: float | None,
    line: OrderLineRequest,
    order_discount_percent: float = 0.0,
    reference_width: float = REFERENCE_WIDTH_INCHES,
) -> PricedLine:
    if not _positive(benchmark_rate_44) or not _positive(line.width_inches):
        return PricedLine()

    derived = derive_rate(benchmark_rate_44, line.width_inches, reference_width)
    effective = line.override_rate_per_roll if line.has_override else derived

    line_subtotal = line.quantity_rolls * effective
    line_discount = line_subtotal * order_discount_percent / 100
    taxable_amount = line_subtotal - line_discount
    line_tax = taxable_amount * line.tax_rate_percent / 100

    total_meters = 0.0
    if line.length_meters_per_roll is not None:
        total_meters = line.length_meters_per_roll * line.quantity_rolls

    return PricedLine(
        derived_rate_per_roll=derived,
        effective_rate_per_roll=effective,
        line_subtotal=line_subtotal,
        line_discount=line_discount,
        taxable_amount=taxable_amount,
        line_tax=line_tax,
        line_total=taxable_amount + line_tax,
        total_meters=total_meters,
    )


def total_priced_lines(priced_lines: Iterable[PricedLine]) -> OrderTotals:
    subtotal = 0.0
    discount_amount = 0.0
    tax_amount = 0.0

    for priced in priced_lines:
        subtotal += priced.line_subtotal
        discount_amount += priced.line_discount
        tax_amount += priced.line_tax

    return OrderTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax_amount=tax_amount,
        grand_total=subtotal - discount_amount + tax_amount,
    )


def aggregate_order(
    benchmark_rate_44: float | None,
    lines: Iterable[OrderLineRequest],
    order_discount_percent: float = 0.0,
    reference_width: float = REFERENCE_WIDTH_INCHES,
) -> OrderTotals:
    return total_priced_lines(
        price_line(benchmark_rate_44, line, order_discount_percent, reference_width)
        for line in lines
    )


def price_order(
    benchmark_rate_44: float | None,
    lines: Iterable[OrderLineRequest],
    order_discount_percent: float = 0.0,
    reference_width: float = REFERENCE_WIDTH_INCHES,
) -> PricedOrder:
    """Price every line and total them in one pass."""
    priced_lines = [
        price_line(benchmark_rate_44, line, order_discount_percent, reference_width)
        for line in lines
    ]
    return PricedOrder(lines=priced_lines, totals=total_priced_lines(priced_lines))
