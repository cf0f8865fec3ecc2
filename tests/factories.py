"""Test data builders"""
from datetime import datetime

from app.models import Asset


def make_asset(**overrides) -> Asset:
    """Build an unsaved Asset with every column populated"""
    fields = dict(
        id="asset_test",
        name="Downtown Office Tower",
        symbol="DOT",
        asset_type="Real Estate",
        institution="Acme Realty Trust",
        institution_address="100 Main St",
        description="Class A office building",
        total_supply=1000,
        staked_amount=0,
        price_usd=1.0,
        annual_yield=8.5,
        blockchain="Lisk",
        contract_address="pending",
        tx_hash="",
        documents_uri="",
        image_uri="",
        created_at=datetime(2024, 3, 15, 10, 30, 0),
        updated_at=datetime(2024, 3, 15, 10, 30, 0),
    )
    fields.update(overrides)
    return Asset(**fields)
