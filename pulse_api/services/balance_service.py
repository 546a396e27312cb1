"""
Este módulo proporciona el servicio para obtener el balance de la moneda nativa de una dirección.
"""

from typing import Dict

from web3 import Web3

from pulse_api.core.constants import INVALID_ADDRESS_MESSAGE
from pulse_api.core.errors import ClientInputError
from pulse_api.services.ledger_client import LedgerClient
from pulse_api.utils.web3_utils import from_base_units, is_valid_address

async def get_balance(client: LedgerClient, addr: str) -> Dict[str, str]:
    """
    Obtiene el balance de PLS para una dirección.

    Args:
        client (LedgerClient): Cliente del nodo RPC.
        addr (str): La dirección para la cual obtener el balance.

    Returns:
        Dict[str, str]: {"balance": "<cantidad decimal>"}.

    Raises:
        ClientInputError: Si la dirección es inválida.
        UpstreamError: Si falla la llamada al nodo.
    """
    if not is_valid_address(addr):
        raise ClientInputError(INVALID_ADDRESS_MESSAGE)

    checksum_address = Web3.to_checksum_address(addr)
    balance = await client.get_native_balance(checksum_address)
    return {"balance": from_base_units(balance)}
