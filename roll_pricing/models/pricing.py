from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TAX_RATE_PERCENT = 18.0


class OrderLineRequest(BaseModel):
    """One sales order line as the engine sees it.

    `override_rate_per_roll` is tri-state: None means not set, 0 means a
    deliberate free line, anything else replaces the derived rate.
    """

    model_config = ConfigDict(frozen=True)

    width_inches: float | None = Field(default=None)
    quantity_rolls: int = Field(default=0)
    override_rate_per_roll: float | None = Field(default=None)
    tax_rate_percent: float = Field(default=DEFAULT_TAX_RATE_PERCENT)
    length_meters_per_roll: float | None = Field(default=None)

    @property
    def has_override(self) -> bool:
        return self.override_rate_per_roll is not None


class PricedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    derived_rate_per_roll: float = 0.0
    effective_rate_per_roll: float = 0.0
    line_subtotal: float = 0.0
    line_discount: float = 0.0
    taxable_amount: float = 0.0
    line_tax: float = 0.0
    line_total: float = 0.0
    total_meters: float = 0.0


class OrderTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: float = 0.0
    discount_amount: float = 0.0
    tax_amount: float = 0.0
    grand_total: float = 0.0


class PricedOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: list[PricedLine] = Field(default_factory=list)
    totals: OrderTotals = Field(default_factory=OrderTotals)
