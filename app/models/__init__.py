"""Database Models"""
from app.models.asset import Asset

__all__ = [
    "Asset",
]
