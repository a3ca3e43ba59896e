from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from roll_pricing.config import settings
from roll_pricing.errors import InvalidOrderError, register_error_handlers
from roll_pricing.observability import configure_logging
from roll_pricing.pricing.engine import derive_rate, price_line, price_order
from roll_pricing.schemas.pricing import (
    DeriveRateOut,
    DeriveRateRequest,
    LinePricingRequest,
    OrderPricingRequest,
    OrderTotalsOut,
    PricedLineOut,
    PricedOrderOut,
    PricingDefaultsOut,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    logger.info(
        "service_started",
        app=settings.APP_NAME,
        reference_width=settings.REFERENCE_WIDTH_INCHES,
        default_tax_rate=settings.DEFAULT_TAX_RATE_PERCENT,
    )
    yield
    logger.info("service_stopped", app=settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
register_error_handlers(app)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/pricing/defaults", response_model=PricingDefaultsOut)
async def pricing_defaults():
    return PricingDefaultsOut(
        reference_width_inches=settings.REFERENCE_WIDTH_INCHES,
        default_tax_rate_percent=settings.DEFAULT_TAX_RATE_PERCENT,
        default_length_meters_per_roll=settings.DEFAULT_LENGTH_METERS_PER_ROLL,
    )


@app.post("/pricing/derive-rate", response_model=DeriveRateOut)
async def derive_width_rate(request: DeriveRateRequest):
    derived = derive_rate(request.base_rate_44, request.width_inches, settings.REFERENCE_WIDTH_INCHES)
    return DeriveRateOut(
        derived_rate_per_roll=derived,
        reference_width_inches=settings.REFERENCE_WIDTH_INCHES,
    )


@app.post("/pricing/line", response_model=PricedLineOut)
async def price_order_line(request: LinePricingRequest):
    line = request.line.to_line_request(
        settings.DEFAULT_TAX_RATE_PERCENT, settings.DEFAULT_LENGTH_METERS_PER_ROLL
    )
    priced = price_line(
        request.base_rate_44,
        line,
        request.discount_percent,
        settings.REFERENCE_WIDTH_INCHES,
    )

    logger.info(
        "line_priced",
        sku_id=request.line.sku_id,
        override=line.has_override,
        line_total=priced.line_total,
    )
    return PricedLineOut.from_priced(priced, request.line.sku_id)


@app.post("/pricing/order", response_model=PricedOrderOut)
async def price_sales_order(request: OrderPricingRequest):
    if len(request.lines) > settings.MAX_ORDER_LINES:
        raise InvalidOrderError(
            f"Order has {len(request.lines)} lines, the limit is {settings.MAX_ORDER_LINES}"
        )

    lines = [
        line.to_line_request(settings.DEFAULT_TAX_RATE_PERCENT, settings.DEFAULT_LENGTH_METERS_PER_ROLL)
        for line in request.lines
    ]
    priced = price_order(
        request.base_rate_44,
        lines,
        request.discount_percent,
        settings.REFERENCE_WIDTH_INCHES,
    )

    logger.info(
        "order_priced",
        line_count=len(lines),
        discount_percent=request.discount_percent,
        grand_total=priced.totals.grand_total,
    )
    return PricedOrderOut(
        lines=[
            PricedLineOut.from_priced(priced_line, line_in.sku_id)
            for priced_line, line_in in zip(priced.lines, request.lines)
        ],
        totals=OrderTotalsOut.from_totals(priced.totals),
    )


if __name__ == "__main__":
    # python -m roll_pricing.main
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
