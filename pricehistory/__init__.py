"""
pricehistory: queries over run-length encoded price and stock histories.

Usage:
    >>> from pricehistory import PRICE, SeriesAnalyzer
    >>> analyzer = SeriesAnalyzer(PRICE)
    >>> analyzer.extremes_in_interval([100, 50, 200, -1, 300, 80], 0, 400)
    ExtremePoints(min_time=100, min_value=50, max_time=300, max_value=80)
"""

__version__ = "1.0.0"

from pricehistory.engine import SeriesAnalyzer
from pricehistory.models import (
    COUNT,
    NO_DATA,
    PRICE,
    PRICE_WITH_SHIPPING,
    ChannelDescriptor,
    ExtremePoints,
    PriceAndAuxCost,
    SeriesSummary,
)

__all__ = [
    "SeriesAnalyzer",
    "ChannelDescriptor",
    "PRICE",
    "PRICE_WITH_SHIPPING",
    "COUNT",
    "NO_DATA",
    "ExtremePoints",
    "PriceAndAuxCost",
    "SeriesSummary",
]
