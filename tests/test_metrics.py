from datetime import datetime, timedelta

import pytest

from app.schemas.asset import Staker
from app.services.metrics import derive_asset_view, derive_token_stats
from tests.factories import make_asset


def test_partial_staking_metrics():
    view = derive_asset_view(make_asset(total_supply=1000, staked_amount=250, price_usd=2.0))

    assert view.available_supply == 750
    assert view.staking_progress == 25.0
    assert view.market_cap == 2000.0
    assert view.total_value == view.market_cap
    assert view.staked_value == 500.0
    assert view.available_value == 1500.0
    assert view.min_investment == 2.0
    assert view.max_investment == 1500.0


def test_zero_supply_does_not_divide_by_zero():
    view = derive_asset_view(make_asset(total_supply=0, staked_amount=0, price_usd=5.0))

    assert view.staking_progress == 0
    assert view.available_supply == 0
    assert view.available_value == 0
    assert view.max_investment == view.min_investment == 5.0


def test_fully_staked_keeps_max_investment_at_minimum():
    view = derive_asset_view(make_asset(total_supply=500, staked_amount=500, price_usd=3.5))

    assert view.available_supply == 0
    assert view.staking_progress == 100.0
    assert view.max_investment == view.min_investment == 3.5


def test_available_supply_is_clamped_at_zero():
    # Rows written before the supply ceiling existed may be over-staked
    view = derive_asset_view(make_asset(total_supply=100, staked_amount=150))

    assert view.available_supply == 0


@pytest.mark.parametrize("total,staked,price", [
    (1, 0, 0.0),
    (1, 1, 1.0),
    (3, 1, 0.5),
    (1000, 999, 12.25),
    (10**12, 10**6, 1.0),
])
def test_metric_bounds(total, staked, price):
    view = derive_asset_view(make_asset(total_supply=total, staked_amount=staked, price_usd=price))

    assert view.available_supply == total - staked
    assert 0 <= view.staking_progress <= 100
    assert view.max_investment >= view.min_investment


@pytest.mark.parametrize("address,active", [
    ("pending", False),
    ("", False),
    ("0xABC", True),
])
def test_contract_active_flag(address, active):
    assert derive_asset_view(make_asset(contract_address=address)).is_contract_active is active


def test_documents_from_uri_use_creation_date():
    view = derive_asset_view(make_asset(documents_uri="ipfs://docs"))

    assert len(view.documents) == 1
    doc = view.documents[0]
    assert doc.name == "Supporting Documents"
    assert doc.date == "2024-03-15"
    assert doc.url == "ipfs://docs"


def test_no_documents_without_uri():
    assert derive_asset_view(make_asset(documents_uri="")).documents == []


def test_placeholder_stakers_split_staked_amount():
    view = derive_asset_view(make_asset(total_supply=1000, staked_amount=200))

    assert [s.percentage for s in view.top_stakers] == [40.0, 35.0, 25.0]
    assert [s.amount for s in view.top_stakers] == pytest.approx([80.0, 70.0, 50.0])
    assert sum(s.amount for s in view.top_stakers) == pytest.approx(200.0)


def test_no_stakers_when_nothing_staked():
    assert derive_asset_view(make_asset(staked_amount=0)).top_stakers == []


def test_staker_source_can_be_swapped():
    class LedgerStakers:
        def top_stakers(self, asset):
            return [Staker(address="0xfeed", amount=float(asset.staked_amount), percentage=100.0)]

        def holder_count(self, asset):
            return 1

    asset = make_asset(total_supply=1000, staked_amount=400, price_usd=2.0)
    view = derive_asset_view(asset, stakers=LedgerStakers())

    assert [s.address for s in view.top_stakers] == ["0xfeed"]
    # Remaining metrics are unaffected by the staker source
    assert view.staking_progress == 40.0
    assert derive_token_stats(asset, stakers=LedgerStakers()).holder_count == 1


def test_view_is_deterministic():
    asset = make_asset(staked_amount=10, documents_uri="ipfs://docs")

    assert derive_asset_view(asset) == derive_asset_view(asset)


def test_view_serializes_with_wire_names():
    body = derive_asset_view(make_asset(documents_uri="ipfs://docs", image_uri="ipfs://img")).model_dump(by_alias=True)

    for key in ("type", "totalSupply", "stakedAmount", "priceUsd", "annualYield", "contractAddress",
                "txHash", "documentsURI", "imageURI", "topStakers", "availableSupply", "marketCap",
                "minInvestment", "maxInvestment", "stakingProgress", "isContractActive", "totalValue",
                "stakedValue", "availableValue", "createdAt", "updatedAt", "institutionAddress"):
        assert key in body


def test_token_stats():
    stats = derive_token_stats(make_asset(total_supply=1000, price_usd=2.5))

    assert stats.total_supply == 1000
    assert stats.circulating_supply == 1000
    assert stats.holder_count == 3
    assert stats.price == 2.5
    assert stats.market_cap == 2500.0


def test_timestamps_are_utc_aware():
    view = derive_asset_view(make_asset())

    assert view.created_at.utcoffset() == timedelta(0)
    assert view.updated_at.utcoffset() == timedelta(0)
    assert view.created_at.replace(tzinfo=None) == datetime(2024, 3, 15, 10, 30, 0)
