"""
Wish Service Contracts

This module provides the contracts for wish_service testing.
"""

from .data_contract import (
    REFERENCE_END_TIMESTAMP,
    WishTestDataFactory,
    WishCreateRequestBuilder,
    FundRequestBuilder,
)

__all__ = [
    "REFERENCE_END_TIMESTAMP",
    "WishTestDataFactory",
    "WishCreateRequestBuilder",
    "FundRequestBuilder",
]
