from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.asset import (
    MintRequest,
    UpdateContractRequest,
    UpdateStakingRequest,
    AssetResponse,
    AssetListResponse,
    MintResponse,
    TokenStats,
)
from app.services.asset_service import (
    AssetService,
    AssetServiceError,
    StorageError,
    build_asset_from_mint,
)
from app.services.metrics import derive_asset_view, derive_token_stats
from app.api.responses import envelope, service_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assets", tags=["Assets"])


def get_asset_service(db: AsyncSession = Depends(get_db)) -> AssetService:
    return AssetService(db)


@router.get("", response_model=ApiResponse[AssetListResponse])
@router.get("/", response_model=ApiResponse[AssetListResponse], include_in_schema=False)
async def list_assets(service: AssetService = Depends(get_asset_service)):
    """
    List all assets, newest first

    Example:
    ```
    GET /api/assets
    ```
    """
    try:
        assets = await service.list_all()
    except AssetServiceError as e:
        logger.error(f"List assets failed: {e}", exc_info=True)
        raise service_error("Failed to fetch assets", e)

    views = [derive_asset_view(asset) for asset in assets]
    return envelope("Assets fetched successfully", AssetListResponse(assets=views, total=len(views)))


@router.post("/mint", response_model=ApiResponse[MintResponse], status_code=status.HTTP_201_CREATED)
async def mint_asset(
    request: MintRequest,
    service: AssetService = Depends(get_asset_service),
):
    """
    Mint a new asset

    Numeric fields are sent as strings. pricePerRWA defaults to "1.0" and
    contractAddress to "pending".

    Example:
    ```
    POST /api/assets/mint
    Body: {
        "name": "Downtown Office Tower",
        "symbol": "DOT",
        "institutionName": "Acme Realty",
        "totalSupply": "1000",
        "expectedYield": "8.5",
        "pricePerRWA": "250.0"
    }
    ```
    """
    try:
        asset = build_asset_from_mint(request)
        asset = await service.create(asset)
    except StorageError as e:
        logger.error(f"Mint failed: {e}", exc_info=True)
        raise service_error("Failed to save asset", e)
    except AssetServiceError as e:
        raise service_error(str(e), e)

    return envelope(
        "Asset minted successfully",
        MintResponse(id=asset.id, asset=derive_asset_view(asset)),
    )


@router.get("/{asset_id}", response_model=ApiResponse[AssetResponse])
async def get_asset(asset_id: str, service: AssetService = Depends(get_asset_service)):
    """Get a single asset with derived metrics"""
    try:
        asset = await service.get_by_id(asset_id)
    except AssetServiceError as e:
        raise service_error("Failed to fetch asset", e)

    return envelope("Asset fetched successfully", derive_asset_view(asset))


@router.get("/{asset_id}/stats", response_model=ApiResponse[TokenStats])
async def get_asset_stats(asset_id: str, service: AssetService = Depends(get_asset_service)):
    """Token statistics for an asset (holder data is placeholder until an indexer exists)"""
    try:
        asset = await service.get_by_id(asset_id)
    except AssetServiceError as e:
        raise service_error("Failed to fetch asset stats", e)

    return envelope("Asset stats fetched successfully", derive_token_stats(asset))


@router.patch("/{asset_id}/contract", response_model=ApiResponse[AssetResponse])
async def update_contract_address(
    asset_id: str,
    request: UpdateContractRequest,
    service: AssetService = Depends(get_asset_service),
):
    """
    Record the contract address after deployment

    Example:
    ```
    PATCH /api/assets/asset_4f1c.../contract
    Body: {"contractAddress": "0xABC...", "txHash": "0xdef..."}
    ```
    """
    try:
        asset = await service.update_contract(asset_id, request.contract_address, request.tx_hash)
    except StorageError as e:
        logger.error(f"Contract update failed: {e}", exc_info=True)
        raise service_error("Failed to update asset", e)
    except AssetServiceError as e:
        raise service_error(str(e), e)

    return envelope("Contract address updated successfully", derive_asset_view(asset))


@router.patch("/{asset_id}/staking", response_model=ApiResponse[AssetResponse])
async def update_asset_staking(
    asset_id: str,
    request: UpdateStakingRequest,
    service: AssetService = Depends(get_asset_service),
):
    """
    Update the staked amount (must not exceed total supply)

    Example:
    ```
    PATCH /api/assets/asset_4f1c.../staking
    Body: {"stakedAmount": 250}
    ```
    """
    try:
        asset = await service.update_staking(asset_id, request.staked_amount)
    except StorageError as e:
        logger.error(f"Staking update failed: {e}", exc_info=True)
        raise service_error("Failed to update staking", e)
    except AssetServiceError as e:
        raise service_error(str(e), e)

    return envelope("Staking updated successfully", derive_asset_view(asset))
