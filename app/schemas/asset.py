"""Asset Schemas - Request/Response Models

Wire names are camelCase. Numeric mint fields arrive as strings and are
parsed by app.services.asset_service.build_asset_from_mint.
"""
from pydantic import BaseModel, Field, validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, List


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


def _coerce_to_str(v):
    # Clients occasionally send JSON numbers where strings are expected
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    if isinstance(v, str):
        return v.strip()
    return v


class MintRequest(CamelModel):
    """Request schema for minting a new asset"""
    name: str = Field(..., min_length=1, max_length=200)
    symbol: str = Field(..., min_length=1, max_length=50)
    institution_name: str = Field(..., min_length=1, max_length=200)
    institution_address: str = Field("", max_length=500)
    description: str = Field("", max_length=5000)
    total_supply: str = Field(..., min_length=1, description="String-encoded non-negative integer")
    expected_yield: str = Field(..., min_length=1, description="String-encoded annual yield percentage")
    price_per_rwa: Optional[str] = Field(None, alias="pricePerRWA", description="String-encoded unit price, defaults to 1.0")
    contract_address: Optional[str] = Field(None, max_length=100)
    tx_hash: str = Field("", max_length=100)
    documents_uri: str = Field("", alias="documentsURI", max_length=1000)
    image_uri: str = Field("", alias="imageURI", max_length=1000)

    @validator(
        'name', 'symbol', 'institution_name', 'total_supply', 'expected_yield',
        'price_per_rwa', 'contract_address', pre=True,
    )
    def coerce_string_fields(cls, v):
        return _coerce_to_str(v)

    @validator('institution_address', 'description', 'tx_hash', 'documents_uri', 'image_uri', pre=True)
    def null_as_empty(cls, v):
        # null and absent both mean empty
        if v is None:
            return ""
        return v


class UpdateContractRequest(CamelModel):
    """Request schema for recording a deployed contract"""
    contract_address: str = Field(..., min_length=1, max_length=100)
    tx_hash: Optional[str] = Field(None, max_length=100)

    @validator('contract_address', pre=True)
    def strip_address(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class UpdateStakingRequest(CamelModel):
    """Request schema for updating the staked amount"""
    staked_amount: int = Field(..., ge=0, description="New staked amount, at most the total supply")


class Document(BaseModel):
    name: str
    date: str
    url: str


class Staker(BaseModel):
    address: str
    amount: float
    percentage: float


class AssetResponse(CamelModel):
    """Asset record enriched with derived financial metrics"""
    id: str
    name: str
    symbol: str
    asset_type: str = Field(..., alias="type")
    institution: str
    institution_address: str
    description: str
    total_supply: int
    staked_amount: int
    price_usd: float
    annual_yield: float
    created_at: datetime
    updated_at: datetime
    blockchain: str
    contract_address: str
    tx_hash: str
    documents_uri: str = Field(..., alias="documentsURI")
    image_uri: str = Field(..., alias="imageURI")
    documents: List[Document]
    top_stakers: List[Staker]

    # Derived metrics
    available_supply: int
    market_cap: float
    min_investment: float
    max_investment: float
    staking_progress: float
    is_contract_active: bool
    total_value: float
    staked_value: float
    available_value: float


class MintResponse(BaseModel):
    id: str
    asset: AssetResponse


class AssetListResponse(BaseModel):
    assets: List[AssetResponse]
    total: int


class TokenStats(CamelModel):
    """Token statistics for an asset"""
    total_supply: int
    circulating_supply: int
    holder_count: int
    price: float
    market_cap: float


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    database: str
    total_assets: int


class ServiceInfo(BaseModel):
    message: str
    version: str
