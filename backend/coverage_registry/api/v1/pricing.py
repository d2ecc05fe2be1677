"""
Price reference endpoints.
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ...pricing import PriceReferenceAdapter
from ..deps import get_price_adapter

router = APIRouter()


class QuoteResponse(BaseModel):
    value: int
    decimals: int


class ConversionResponse(BaseModel):
    nominal_amount: int
    converted_amount: int


@router.get("/quote", response_model=QuoteResponse)
async def get_quote(prices: PriceReferenceAdapter = Depends(get_price_adapter)):
    """Get the latest validated reference quote"""
    quote = await prices.latest_quote()
    return QuoteResponse(value=quote.value, decimals=quote.decimals)


@router.get("/convert", response_model=ConversionResponse)
async def convert_amount(
    amount: int = Query(..., ge=0, description="Nominal amount in the source unit"),
    prices: PriceReferenceAdapter = Depends(get_price_adapter),
):
    """Convert a nominal amount into the target unit at the latest rate"""
    converted = await prices.convert(amount)
    return ConversionResponse(nominal_amount=amount, converted_amount=converted)
