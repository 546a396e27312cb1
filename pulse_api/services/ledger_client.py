"""
Este módulo proporciona el cliente de lectura sobre el nodo RPC de PulseChain.

Una sola instancia se crea al iniciar la aplicación y se comparte entre todas las
peticiones. No reintenta ni guarda resultados en caché: los errores del nodo se
propagan como UpstreamError.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

import aiohttp
from cachetools import LRUCache
from web3 import AsyncWeb3, Web3
from web3.exceptions import Web3Exception

from pulse_api.core.constants import QUOTE_ROUTER
from pulse_api.core.errors import UpstreamError

logger = logging.getLogger(__name__)

ABI_DIR = Path(__file__).resolve().parent.parent / "core" / "abi"

# Cargar ABIs de los contratos
ABI = {}
for _name in ("erc20", "swap_router"):
    with open(ABI_DIR / f"{_name}.json", "r") as file:
        ABI[_name] = json.load(file)

UPSTREAM_ERRORS = (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, ValueError)


class LedgerClient:
    def __init__(self, w3: AsyncWeb3, router_address: str = QUOTE_ROUTER):
        self._w3 = w3
        self.router_address = Web3.to_checksum_address(router_address)
        # Solo se reutilizan los objetos Contract, nunca los resultados
        self._contracts = LRUCache(maxsize=256)

    def _contract(self, address: str, abi_name: str):
        key = (address, abi_name)
        contract = self._contracts.get(key)
        if contract is None:
            contract = self._w3.eth.contract(address=address, abi=ABI[abi_name])
            self._contracts[key] = contract
        return contract

    async def get_native_balance(self, address: str) -> int:
        """
        Obtiene el balance de la moneda nativa (PLS) en unidades base.

        Raises:
            UpstreamError: Si la llamada al nodo falla.
        """
        try:
            return int(await self._w3.eth.get_balance(address))
        except UPSTREAM_ERRORS as e:
            logger.error(f"Error getting balance for {address}: {e}", exc_info=True)
            raise UpstreamError(_message(e)) from e

    async def read_contract(self, address: str, abi_name: str, method: str, *args: Any) -> Any:
        """
        Llama un método de solo lectura de un contrato.

        Args:
            address (str): Dirección checksum del contrato.
            abi_name (str): ABI a usar ("erc20" o "swap_router").
            method (str): Nombre del método.
            *args: Argumentos del método.

        Returns:
            Any: El valor decodificado que retorna el contrato.

        Raises:
            UpstreamError: Si el contrato revierte, el nodo no responde o la respuesta
                no se puede decodificar.
        """
        contract = self._contract(address, abi_name)
        try:
            return await getattr(contract.functions, method)(*args).call()
        except UPSTREAM_ERRORS as e:
            logger.error(f"Error calling {method} on {address}: {e}", exc_info=True)
            raise UpstreamError(_message(e)) from e

    async def get_amounts_out(self, amount_in: int, path: Sequence[str]) -> List[int]:
        """
        Cotiza amount_in a lo largo de path usando getAmountsOut del router.

        Returns:
            List[int]: Cantidades en unidades base para cada salto de path.

        Raises:
            UpstreamError: Si algún par no tiene liquidez o la respuesta es inválida.
        """
        amounts = await self.read_contract(
            self.router_address, "swap_router", "getAmountsOut", amount_in, list(path)
        )
        if not isinstance(amounts, (list, tuple)) or len(amounts) != len(path):
            raise UpstreamError(f"Malformed getAmountsOut response: {amounts!r}")
        return [int(amount) for amount in amounts]

    async def close(self) -> None:
        await self._w3.provider.disconnect()


def _message(error: Exception) -> str:
    # ContractLogicError guarda el motivo del revert en .message
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or type(error).__name__
