"""Staker data sources

There is no ledger or indexer integration yet. PlaceholderStakerSource
produces fixed demonstration data so the frontend has something to render;
a real source only needs to implement the StakerSource interface.
"""
from typing import List, Protocol, Tuple

from app.models import Asset
from app.schemas.asset import Staker


class StakerSource(Protocol):
    def top_stakers(self, asset: Asset) -> List[Staker]:
        ...

    def holder_count(self, asset: Asset) -> int:
        ...


class PlaceholderStakerSource:
    """Splits the staked amount across three fixed mock addresses"""

    SPLITS: Tuple[Tuple[str, float], ...] = (
        ("0x1234...5678", 40.0),
        ("0xabcd...efgh", 35.0),
        ("0x9876...5432", 25.0),
    )

    def top_stakers(self, asset: Asset) -> List[Staker]:
        staked = asset.staked_amount or 0
        if staked <= 0:
            return []

        return [
            Staker(address=address, amount=staked * percentage / 100, percentage=percentage)
            for address, percentage in self.SPLITS
        ]

    def holder_count(self, asset: Asset) -> int:
        return len(self.SPLITS)


placeholder_stakers = PlaceholderStakerSource()
