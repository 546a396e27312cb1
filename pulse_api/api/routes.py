import logging

from fastapi import APIRouter, Depends

from pulse_api.api.dependencies import get_ledger_client
from pulse_api.api.schemas import (
    BalanceResponse,
    MessageResponse,
    PriceResponse,
    TokenListResponse,
    TokenResponse,
)
from pulse_api.core.constants import CONTRACTS, ROOT_MESSAGE, TOKENS
from pulse_api.services.balance_service import get_balance
from pulse_api.services.ledger_client import LedgerClient
from pulse_api.services.price_service import get_price
from pulse_api.services.token_service import get_token_metadata

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_model=MessageResponse)
async def root():
    return {"message": ROOT_MESSAGE}

@router.get("/balance/{address}", response_model=BalanceResponse)
async def get_address_balance(address: str, client: LedgerClient = Depends(get_ledger_client)):
    """
    Obtiene el balance de PLS de una dirección.

    - **address**: Dirección para la cual se quiere obtener el balance
    """
    logger.info(f"Requesting balance for address: {address}")
    return await get_balance(client, address)

@router.get("/token/{address}", response_model=TokenResponse)
async def get_token(address: str, client: LedgerClient = Depends(get_ledger_client)):
    """
    Obtiene nombre, símbolo, decimales y suministro total de un token ERC20.

    - **address**: Dirección del contrato del token
    """
    logger.info(f"Requesting token metadata for: {address}")
    return await get_token_metadata(client, address)

@router.get("/price/{token_in}/{amount_in}", response_model=PriceResponse)
async def get_token_price(
    token_in: str,
    amount_in: str,
    client: LedgerClient = Depends(get_ledger_client),
):
    """
    Cotiza una cantidad de token en WPLS y en USD (DAI) usando el router de PulseX.

    - **token_in**: Dirección del token a cotizar
    - **amount_in**: Cantidad decimal del token, por ejemplo 1.5
    """
    logger.info(f"Requesting price for {amount_in} of: {token_in}")
    return await get_price(client, token_in, amount_in)

@router.get("/tokens", response_model=TokenListResponse)
async def get_tokens():
    """
    Obtiene las direcciones de los tokens y contratos conocidos.
    """
    return {"tokens": TOKENS, "contracts": CONTRACTS}
