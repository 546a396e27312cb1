"""
Este módulo proporciona el servicio de cotización de tokens contra WPLS y contra DAI (USD)
usando getAmountsOut del router de PulseX.
"""

import asyncio
import logging
from typing import Dict, List, Sequence

from web3 import Web3

from pulse_api.core.constants import INVALID_ADDRESS_MESSAGE, TOKENS
from pulse_api.core.errors import ClientInputError
from pulse_api.services.ledger_client import LedgerClient
from pulse_api.utils.web3_utils import from_base_units, is_valid_address, to_base_units

logger = logging.getLogger(__name__)

WPLS = Web3.to_checksum_address(TOKENS["WPLS"])
DAI = Web3.to_checksum_address(TOKENS["DAI"])

def collapse_path(path: Sequence[str]) -> List[str]:
    """Elimina saltos consecutivos repetidos (p. ej. [WPLS, WPLS, DAI] -> [WPLS, DAI])."""
    collapsed: List[str] = []
    for token in path:
        if not collapsed or collapsed[-1] != token:
            collapsed.append(token)
    return collapsed

async def quote(client: LedgerClient, amount_in: int, path: Sequence[str]) -> int:
    """
    Retorna la cantidad final de cotizar amount_in a lo largo de path.

    Un path que colapsa a un único token es una cotización identidad y no llama al nodo.
    """
    path = collapse_path(path)
    if len(path) == 1:
        return amount_in
    amounts = await client.get_amounts_out(amount_in, path)
    return amounts[-1]

async def get_price(client: LedgerClient, token_in: str, amount_in: str) -> Dict[str, str]:
    """
    Obtiene el precio de una cantidad de token en WPLS y en USD (DAI).

    Args:
        client (LedgerClient): Cliente del nodo RPC.
        token_in (str): Dirección del token a cotizar.
        amount_in (str): Cantidad decimal del token, por ejemplo "1.5".

    Returns:
        Dict[str, str]: amountOut (en WPLS) y amountOutUSD (en DAI), como texto decimal.

    Raises:
        ClientInputError: Si la dirección o la cantidad son inválidas.
        UpstreamError: Si alguna de las rutas no tiene liquidez o falla el nodo.
    """
    if not is_valid_address(token_in):
        raise ClientInputError(INVALID_ADDRESS_MESSAGE)

    amount_in_wei = to_base_units(amount_in)
    token = Web3.to_checksum_address(token_in)

    logger.info(f"Quoting {amount_in} of {token}")
    amount_out, amount_out_usd = await asyncio.gather(
        quote(client, amount_in_wei, [token, WPLS]),
        quote(client, amount_in_wei, [token, WPLS, DAI]),
    )
    return {
        "amountOut": from_base_units(amount_out),
        "amountOutUSD": from_base_units(amount_out_usd),
    }
