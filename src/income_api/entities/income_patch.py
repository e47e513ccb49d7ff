"""Income edit payload entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomePatchEntity:
    """Validated fields applied to an existing income record.

    Attributes:
        description: New description, may be empty
        timestamp: New Unix timestamp in seconds, between 0 and now
        category: New category, may be empty
    """

    description: str
    timestamp: int
    category: str
