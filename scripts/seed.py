"""Database Seed Script - Populates sample assets for local development"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import AsyncSessionLocal, init_db, close_db
from app.schemas.asset import MintRequest
from app.services.asset_service import AssetService, build_asset_from_mint
from app.services.metrics import derive_asset_view


SAMPLE_ASSETS = [
    {
        "name": "Downtown Office Tower",
        "symbol": "DOT",
        "institutionName": "Acme Realty Trust",
        "institutionAddress": "100 Main St, Springfield",
        "description": "Class A office building, 92% occupancy",
        "totalSupply": "10000",
        "expectedYield": "7.2",
        "pricePerRWA": "250.0",
        "documentsURI": "ipfs://bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi",
    },
    {
        "name": "Harbor Logistics Warehouse",
        "symbol": "HLW",
        "institutionName": "Bayside Capital",
        "totalSupply": "5000",
        "expectedYield": "9.1",
        "pricePerRWA": "120.5",
        "contractAddress": "0x5FbDB2315678afecb367f032d93F642f64180aa3",
        "txHash": "0x8a3b1c2d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8f9",
    },
    {
        "name": "Riverside Apartments",
        "symbol": "RVA",
        "institutionName": "Greenway Housing",
        "totalSupply": "2000",
        "expectedYield": "8.5",
    },
]

# symbol -> staked amount applied after minting
SAMPLE_STAKING = {"DOT": 2500, "HLW": 5000}


async def seed_database():
    """Seed the database with sample assets"""
    print("=" * 60)
    print("DATABASE SEEDING STARTED")
    print("=" * 60)

    await init_db()

    async with AsyncSessionLocal() as session:
        service = AssetService(session)

        if await service.count() > 0:
            print("\nDatabase already seeded. Skipping...")
            return

        print("\nMinting sample assets...")
        for payload in SAMPLE_ASSETS:
            asset = await service.create(build_asset_from_mint(MintRequest(**payload)))

            staked = SAMPLE_STAKING.get(asset.symbol)
            if staked:
                asset = await service.update_staking(asset.id, staked)

            view = derive_asset_view(asset)
            print(f"   - {view.name} ({view.symbol}) id={view.id}")
            print(f"     market cap ${view.market_cap:,.2f}, staking {view.staking_progress:.1f}%, "
                  f"contract {'active' if view.is_contract_active else 'pending'}")

        print("\n" + "=" * 60)
        print("DATABASE SEEDING COMPLETED SUCCESSFULLY")
        print("=" * 60)
        print("\nNext: uvicorn app.main:app --reload --port 8080")
        print("      GET http://localhost:8080/api/assets")


async def main():
    """Main entry point"""
    try:
        await seed_database()
    except Exception as e:
        print(f"\nSeeding failed: {str(e)}")
        sys.exit(1)
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
