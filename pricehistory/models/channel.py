"""
Channel descriptor for encoded value histories.

A channel tells the engine how to read one history sequence: whether each
record carries an auxiliary cost (shipping, for example) and whether the
channel is a price, which is the only kind of channel for which an
availability percentage is meaningful.
"""

from pydantic import BaseModel, ConfigDict, Field


class ChannelDescriptor(BaseModel):
    """
    Describes the record layout and meaning of one history channel.

    Attributes:
        name: Human readable channel name, used only in log events
        has_auxiliary_cost: Records are (time, value, aux_cost) instead of (time, value)
        is_primary_metric: Channel tracks a price; enables availability percentages
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(default="custom", description="Channel name for log context")
    has_auxiliary_cost: bool = Field(
        default=False, description="Records carry a third auxiliary cost field"
    )
    is_primary_metric: bool = Field(
        default=True, description="Channel is a price; availability percentages apply"
    )

    @property
    def record_width(self) -> int:
        """Number of integers per record."""
        return 3 if self.has_auxiliary_cost else 2


# Well-known channel layouts
PRICE = ChannelDescriptor(name="price", has_auxiliary_cost=False, is_primary_metric=True)
PRICE_WITH_SHIPPING = ChannelDescriptor(
    name="price_with_shipping", has_auxiliary_cost=True, is_primary_metric=True
)
COUNT = ChannelDescriptor(name="count", has_auxiliary_cost=False, is_primary_metric=False)
