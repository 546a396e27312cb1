from typing import Dict

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class BalanceResponse(BaseModel):
    balance: str


class TokenResponse(BaseModel):
    name: str
    symbol: str
    decimals: int
    totalSupply: str


class PriceResponse(BaseModel):
    amountOut: str
    amountOutUSD: str


class TokenListResponse(BaseModel):
    tokens: Dict[str, str]
    contracts: Dict[str, str]
