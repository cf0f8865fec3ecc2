"""Derived financial metrics for asset records"""
from datetime import datetime, timezone
from typing import List

from app.models import Asset
from app.schemas.asset import AssetResponse, Document, TokenStats
from app.services.stakers import StakerSource, placeholder_stakers

PENDING_CONTRACT_ADDRESS = "pending"
SUPPORTING_DOCUMENTS_LABEL = "Supporting Documents"


def _as_utc(value: datetime) -> datetime:
    # Stored timestamps are naive UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _documents(asset: Asset) -> List[Document]:
    if not asset.documents_uri:
        return []

    return [
        Document(
            name=SUPPORTING_DOCUMENTS_LABEL,
            date=asset.created_at.strftime("%Y-%m-%d"),
            url=asset.documents_uri,
        )
    ]


def derive_asset_view(asset: Asset, stakers: StakerSource = placeholder_stakers) -> AssetResponse:
    """
    Build the response view for a stored asset

    Pure: reads only the record (and the staker source), never the clock.
    """
    total_supply = asset.total_supply or 0
    staked_amount = asset.staked_amount or 0
    price = asset.price_usd or 0.0

    available_supply = max(0, total_supply - staked_amount)

    market_cap = total_supply * price
    staked_value = staked_amount * price
    available_value = available_supply * price

    staking_progress = 0.0
    if total_supply > 0:
        staking_progress = staked_amount / total_supply * 100

    contract_address = asset.contract_address or ""
    is_contract_active = contract_address != "" and contract_address != PENDING_CONTRACT_ADDRESS

    # Minimum is one unit; maximum is everything still available, never below the minimum
    min_investment = price
    max_investment = max(available_value, min_investment)

    return AssetResponse(
        id=asset.id,
        name=asset.name,
        symbol=asset.symbol,
        asset_type=asset.asset_type,
        institution=asset.institution,
        institution_address=asset.institution_address or "",
        description=asset.description or "",
        total_supply=total_supply,
        staked_amount=staked_amount,
        price_usd=price,
        annual_yield=asset.annual_yield,
        created_at=_as_utc(asset.created_at),
        updated_at=_as_utc(asset.updated_at),
        blockchain=asset.blockchain,
        contract_address=contract_address,
        tx_hash=asset.tx_hash or "",
        documents_uri=asset.documents_uri or "",
        image_uri=asset.image_uri or "",
        documents=_documents(asset),
        top_stakers=stakers.top_stakers(asset),
        available_supply=available_supply,
        market_cap=market_cap,
        min_investment=min_investment,
        max_investment=max_investment,
        staking_progress=staking_progress,
        is_contract_active=is_contract_active,
        total_value=market_cap,
        staked_value=staked_value,
        available_value=available_value,
    )


def derive_token_stats(asset: Asset, stakers: StakerSource = placeholder_stakers) -> TokenStats:
    """Token statistics; every minted unit counts as circulating"""
    return TokenStats(
        total_supply=asset.total_supply,
        circulating_supply=asset.total_supply,
        holder_count=stakers.holder_count(asset),
        price=asset.price_usd,
        market_cap=asset.total_supply * asset.price_usd,
    )
