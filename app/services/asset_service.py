from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from datetime import datetime
import logging
import math
import re
import uuid
from typing import List, Optional

from app.models import Asset
from app.schemas.asset import MintRequest
from app.services.metrics import PENDING_CONTRACT_ADDRESS
from app.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# Largest value a BigInteger column holds
MAX_SUPPLY = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class AssetServiceError(Exception):
    """Base class for asset store failures"""
    pass


class AssetValidationError(AssetServiceError):
    """Raised when input is malformed or breaks an asset invariant"""
    pass


class AssetNotFoundError(AssetServiceError):
    """Raised when no asset exists with the requested id"""
    pass


class AssetConflictError(AssetServiceError):
    """Raised when an asset id is already taken"""
    pass


class StorageError(AssetServiceError):
    """Raised when the database fails underneath an operation"""
    pass


def generate_asset_id() -> str:
    return f"asset_{uuid.uuid4().hex}"


def _parse_int(field: str, raw: str) -> int:
    # ASCII digits only; int() alone would also take "1_000" and non-ASCII digits
    if not isinstance(raw, str) or not _INT_RE.fullmatch(raw):
        raise AssetValidationError(f"Invalid {field}: '{raw}' is not an integer")
    return int(raw)


def _parse_float(field: str, raw: str) -> float:
    if not isinstance(raw, str) or not _FLOAT_RE.fullmatch(raw):
        raise AssetValidationError(f"Invalid {field}: '{raw}' is not a number")
    value = float(raw)
    if not math.isfinite(value):
        raise AssetValidationError(f"Invalid {field}: '{raw}' is not a finite number")
    return value


def build_asset_from_mint(request: MintRequest, settings: Settings = default_settings) -> Asset:
    """
    Turn a mint payload into a new, unsaved Asset

    Numeric fields arrive string-encoded; they are parsed here and any
    failure names the offending field.
    """
    total_supply = _parse_int("total supply", request.total_supply)
    if total_supply < 0:
        raise AssetValidationError("Invalid total supply: must not be negative")
    if total_supply > MAX_SUPPLY:
        raise AssetValidationError(f"Invalid total supply: must not exceed {MAX_SUPPLY}")

    annual_yield = _parse_float("expected yield", request.expected_yield)

    price_usd = 1.0
    if request.price_per_rwa:
        price_usd = _parse_float("price per RWA", request.price_per_rwa)
        if price_usd < 0:
            raise AssetValidationError("Invalid price per RWA: must not be negative")

    now = datetime.utcnow()
    return Asset(
        id=generate_asset_id(),
        name=request.name,
        symbol=request.symbol,
        asset_type=settings.DEFAULT_ASSET_TYPE,
        institution=request.institution_name,
        institution_address=request.institution_address,
        description=request.description,
        total_supply=total_supply,
        staked_amount=0,
        price_usd=price_usd,
        annual_yield=annual_yield,
        blockchain=settings.DEFAULT_BLOCKCHAIN,
        contract_address=request.contract_address or PENDING_CONTRACT_ADDRESS,
        tx_hash=request.tx_hash,
        documents_uri=request.documents_uri,
        image_uri=request.image_uri,
        created_at=now,
        updated_at=now,
    )


class AssetService:
    """Asset Store - persistence operations for asset records

    Every mutating call runs in a single transaction and commits before
    returning. Database failures are rolled back and raised as StorageError.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _rollback(self):
        try:
            await self.db.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed", exc_info=True)

    async def _get_or_raise(self, asset_id: str) -> Asset:
        try:
            asset = await self.db.get(Asset, asset_id)
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Failed to load asset '{asset_id}': {e}") from e

        if not asset:
            raise AssetNotFoundError(f"Asset '{asset_id}' not found")

        return asset

    @staticmethod
    def _validate(asset: Asset):
        for field in ("id", "name", "symbol", "institution"):
            if not getattr(asset, field, None):
                raise AssetValidationError(f"Missing required field: {field}")

        if asset.total_supply is None or asset.total_supply < 0:
            raise AssetValidationError("Total supply must be a non-negative integer")
        if asset.total_supply > MAX_SUPPLY:
            raise AssetValidationError(f"Total supply must not exceed {MAX_SUPPLY}")

        staked = asset.staked_amount or 0
        if staked < 0:
            raise AssetValidationError("Staked amount must not be negative")
        if staked > asset.total_supply:
            raise AssetValidationError("Staked amount cannot exceed total supply")

        if asset.price_usd is not None and asset.price_usd < 0:
            raise AssetValidationError("Price must not be negative")

    async def create(self, asset: Asset) -> Asset:
        """Insert a new asset and commit"""
        self._validate(asset)

        try:
            existing = await self.db.get(Asset, asset.id)
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Failed to save asset: {e}") from e

        if existing:
            raise AssetConflictError(f"Asset '{asset.id}' already exists")

        now = datetime.utcnow()
        if asset.created_at is None:
            asset.created_at = now
        if asset.updated_at is None:
            asset.updated_at = asset.created_at

        self.db.add(asset)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self._rollback()
            raise AssetConflictError(f"Asset '{asset.id}' already exists") from e
        except Exception as e:
            # Driver errors such as OverflowError are not SQLAlchemyErrors
            await self._rollback()
            raise StorageError(f"Failed to save asset: {e}") from e

        logger.info(f"Minted asset {asset.id} ({asset.symbol}), supply={asset.total_supply}")
        return asset

    async def list_all(self) -> List[Asset]:
        """All assets, newest first"""
        stmt = select(Asset).order_by(Asset.created_at.desc(), Asset.id.desc())
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Failed to fetch assets: {e}") from e

        return list(result.scalars().all())

    async def get_by_id(self, asset_id: str) -> Asset:
        return await self._get_or_raise(asset_id)

    async def update_contract(self, asset_id: str, contract_address: str, tx_hash: Optional[str] = None) -> Asset:
        """
        Record the deployed contract address
        An empty tx_hash leaves the stored hash unchanged
        """
        if not contract_address:
            raise AssetValidationError("Contract address is required")

        asset = await self._get_or_raise(asset_id)

        asset.contract_address = contract_address
        if tx_hash:
            asset.tx_hash = tx_hash
        asset.updated_at = datetime.utcnow()

        await self._commit(f"Failed to update asset '{asset_id}'")
        logger.info(f"Updated contract for asset {asset_id}: {contract_address}")
        return asset

    async def update_staking(self, asset_id: str, staked_amount: int) -> Asset:
        """Set the staked amount, bounded by the asset's total supply"""
        asset = await self._get_or_raise(asset_id)

        if staked_amount < 0:
            raise AssetValidationError("Staked amount must not be negative")
        if staked_amount > asset.total_supply:
            raise AssetValidationError(
                f"Staked amount cannot exceed total supply. Requested: {staked_amount}, Total supply: {asset.total_supply}"
            )

        asset.staked_amount = staked_amount
        asset.updated_at = datetime.utcnow()

        await self._commit(f"Failed to update staking for asset '{asset_id}'")
        logger.info(f"Updated staking for asset {asset_id}: {staked_amount}/{asset.total_supply}")
        return asset

    async def count(self) -> int:
        stmt = select(func.count()).select_from(Asset)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Failed to count assets: {e}") from e

        return result.scalar_one()

    async def ping(self):
        """Connectivity probe"""
        try:
            await self.db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError(f"Database ping failed: {e}") from e

    async def _commit(self, failure_message: str):
        try:
            await self.db.commit()
        except Exception as e:
            await self._rollback()
            raise StorageError(f"{failure_message}: {e}") from e
