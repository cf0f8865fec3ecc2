"""Asset Model - Represents a tokenized real-world asset"""
from sqlalchemy import Column, String, BigInteger, Float, DateTime, Index, CheckConstraint
from datetime import datetime
from app.database import Base


class Asset(Base):
    """Asset Model

    One row per minted real-world asset. Only the contract address and the
    staked amount change after minting; rows are never deleted.
    """
    __tablename__ = "assets"

    id = Column(String(64), primary_key=True)
    name = Column(String(200), nullable=False)
    symbol = Column(String(50), nullable=False)
    asset_type = Column(String(100), default="Real Estate", nullable=False)
    institution = Column(String(200), nullable=False)
    institution_address = Column(String(500), default="", nullable=False)
    description = Column(String(5000), default="", nullable=False)

    total_supply = Column(BigInteger, nullable=False)
    staked_amount = Column(BigInteger, default=0, nullable=False)
    price_usd = Column(Float, default=1.0, nullable=False)
    annual_yield = Column(Float, default=8.5, nullable=False)

    blockchain = Column(String(50), default="Lisk", nullable=False)
    contract_address = Column(String(100), default="pending", nullable=False)  # "pending" until deployed
    tx_hash = Column(String(100), default="", nullable=False)
    documents_uri = Column(String(1000), default="", nullable=False)
    image_uri = Column(String(1000), default="", nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint('total_supply >= 0', name='ck_assets_total_supply_non_negative'),
        CheckConstraint('staked_amount >= 0', name='ck_assets_staked_non_negative'),
        CheckConstraint('staked_amount <= total_supply', name='ck_assets_staked_within_supply'),
        CheckConstraint('price_usd >= 0', name='ck_assets_price_non_negative'),
        Index('idx_assets_created', 'created_at'),
    )

    def __repr__(self):
        return f"<Asset(id='{self.id}', symbol='{self.symbol}', total_supply={self.total_supply}, staked={self.staked_amount})>"
