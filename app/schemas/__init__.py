"""Pydantic Schemas for Request/Response Validation"""
from app.schemas.common import ApiResponse
from app.schemas.asset import (
    MintRequest,
    UpdateContractRequest,
    UpdateStakingRequest,
    AssetResponse,
    AssetListResponse,
    MintResponse,
    Document,
    Staker,
    TokenStats,
    HealthStatus,
    ServiceInfo,
)

__all__ = [
    "ApiResponse",
    "MintRequest",
    "UpdateContractRequest",
    "UpdateStakingRequest",
    "AssetResponse",
    "AssetListResponse",
    "MintResponse",
    "Document",
    "Staker",
    "TokenStats",
    "HealthStatus",
    "ServiceInfo",
]
