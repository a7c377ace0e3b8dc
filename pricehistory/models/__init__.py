"""
Data models for the pricehistory query engine.

Model Organization:
    - channel: Channel descriptor (record layout) and well-known presets
    - results: NamedTuple results and the pydantic SeriesSummary
"""

from .channel import COUNT, PRICE, PRICE_WITH_SHIPPING, ChannelDescriptor
from .results import NO_DATA, ExtremePoints, PriceAndAuxCost, Segment, SeriesSummary

__all__ = [
    "ChannelDescriptor",
    "PRICE",
    "PRICE_WITH_SHIPPING",
    "COUNT",
    "NO_DATA",
    "ExtremePoints",
    "PriceAndAuxCost",
    "Segment",
    "SeriesSummary",
]
