from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from roll_pricing.models.pricing import OrderLineRequest, OrderTotals, PricedLine
from roll_pricing.pricing.coerce import (
    is_blank,
    normalize_id,
    normalize_tax_rate,
    parse_override,
    parse_width,
    to_number,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderLineIn(CamelModel):
    sku_id: str | None = None
    width_inches: float | None = None
    qty_rolls: int = Field(default=0, ge=0)
    override_rate_per_roll: float | None = None
    tax_rate: float | None = None
    length_meters_per_roll: float | None = None

    @field_validator("sku_id", mode="before")
    @classmethod
    def _sku_id(cls, value):
        return normalize_id(value)

    @field_validator("width_inches", mode="before")
    @classmethod
    def _width(cls, value):
        return parse_width(value)

    @field_validator("qty_rolls", mode="before")
    @classmethod
    def _qty(cls, value):
        if is_blank(value):
            return 0
        return value

    @field_validator("override_rate_per_roll", mode="before")
    @classmethod
    def _override(cls, value):
        return parse_override(value)

    @field_validator("tax_rate", mode="before")
    @classmethod
    def _tax_rate(cls, value):
        return normalize_tax_rate(value, default=None)

    @field_validator("length_meters_per_roll", mode="before")
    @classmethod
    def _length(cls, value):
        return to_number(value, default=None)

    def to_line_request(self, default_tax_rate: float, default_length: float | None = None) -> OrderLineRequest:
        tax_rate = default_tax_rate if self.tax_rate is None else self.tax_rate
        length = default_length if self.length_meters_per_roll is None else self.length_meters_per_roll
        return OrderLineRequest(
            width_inches=self.width_inches,
            quantity_rolls=self.qty_rolls,
            override_rate_per_roll=self.override_rate_per_roll,
            tax_rate_percent=tax_rate,
            length_meters_per_roll=length,
        )


class PricingRequest(CamelModel):
    base_rate_44: float | None = None
    discount_percent: float = Field(default=0.0, allow_inf_nan=False)

    @field_validator("base_rate_44", mode="before")
    @classmethod
    def _base_rate(cls, value):
        return to_number(value, default=None)

    @field_validator("discount_percent", mode="before")
    @classmethod
    def _discount(cls, value):
        if is_blank(value):
            return 0.0
        return value


class DeriveRateRequest(CamelModel):
    base_rate_44: float | None = None
    width_inches: float | None = None

    @field_validator("base_rate_44", mode="before")
    @classmethod
    def _base_rate(cls, value):
        return to_number(value, default=None)

    @field_validator("width_inches", mode="before")
    @classmethod
    def _width(cls, value):
        return parse_width(value)


class LinePricingRequest(PricingRequest):
    line: OrderLineIn


class OrderPricingRequest(PricingRequest):
    lines: list[OrderLineIn] = Field(default_factory=list)


class DeriveRateOut(CamelModel):
    derived_rate_per_roll: float
    reference_width_inches: float


class PricedLineOut(CamelModel):
    sku_id: str | None = None
    derived_rate_per_roll: float
    effective_rate_per_roll: float
    line_subtotal: float
    line_discount: float
    taxable_amount: float
    line_tax: float
    line_total: float
    total_meters: float

    @classmethod
    def from_priced(cls, priced: PricedLine, sku_id: str | None = None):
        return cls(sku_id=sku_id, **priced.model_dump())


class OrderTotalsOut(CamelModel):
    subtotal: float
    discount_amount: float
    tax_amount: float
    grand_total: float

    @classmethod
    def from_totals(cls, totals: OrderTotals):
        return cls(**totals.model_dump())


class PricedOrderOut(CamelModel):
    lines: list[PricedLineOut]
    totals: OrderTotalsOut


class PricingDefaultsOut(CamelModel):
    reference_width_inches: float
    default_tax_rate_percent: float
    default_length_meters_per_roll: float
