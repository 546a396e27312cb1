"""
Este módulo proporciona el servicio para leer los metadatos de un token ERC20.
"""

import asyncio
from typing import Any, Dict

from web3 import Web3

from pulse_api.core.constants import INVALID_ADDRESS_MESSAGE
from pulse_api.core.errors import ClientInputError
from pulse_api.services.ledger_client import LedgerClient
from pulse_api.utils.web3_utils import is_valid_address

METADATA_METHODS = ("name", "symbol", "decimals", "totalSupply")

async def get_token_metadata(client: LedgerClient, addr: str) -> Dict[str, Any]:
    """
    Obtiene nombre, símbolo, decimales y suministro total de un token.

    Las cuatro lecturas se hacen en paralelo y deben tener éxito todas; si una falla
    la petición completa falla.

    Args:
        client (LedgerClient): Cliente del nodo RPC.
        addr (str): Dirección del contrato del token.

    Returns:
        Dict[str, Any]: name, symbol, decimals y totalSupply (este último como texto).

    Raises:
        ClientInputError: Si la dirección es inválida.
        UpstreamError: Si alguna de las lecturas falla.
    """
    if not is_valid_address(addr):
        raise ClientInputError(INVALID_ADDRESS_MESSAGE)

    token = Web3.to_checksum_address(addr)
    name, symbol, decimals, total_supply = await asyncio.gather(
        *(client.read_contract(token, "erc20", method) for method in METADATA_METHODS)
    )
    return {
        "name": name,
        "symbol": symbol,
        "decimals": int(decimals),
        "totalSupply": str(total_supply),
    }
