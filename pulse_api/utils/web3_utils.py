"""
Este módulo proporciona utilidades para interactuar con la red PulseChain usando Web3:
creación del cliente, validación de direcciones y conversión de unidades.
"""

import re
from typing import Any

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from pulse_api.core.constants import MAX_UINT256, NATIVE_DECIMALS
from pulse_api.core.errors import ClientInputError

_DECIMAL_RE = re.compile(r"(?P<whole>\d*)(?:\.(?P<fraction>\d*))?", re.ASCII)


def get_web3(rpc_url: str, timeout: float) -> AsyncWeb3:
    """
    Crea y retorna una instancia de AsyncWeb3 conectada al nodo indicado.

    Args:
        rpc_url (str): URL del nodo JSON-RPC.
        timeout (float): Tiempo máximo en segundos para cada llamada HTTP.

    Returns:
        AsyncWeb3: Una instancia de AsyncWeb3 con un proveedor HTTP asíncrono.
    """
    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
    )
    return AsyncWeb3(provider)


def is_valid_address(value: Any) -> bool:
    """
    Indica si el valor es una dirección válida (40 caracteres hex, checksum EIP-55
    si viene en mayúsculas y minúsculas mezcladas).
    """
    if not isinstance(value, str) or not Web3.is_address(value):
        return False
    hex_part = value[2:] if value[:2].lower() == "0x" else value
    if hex_part != hex_part.lower() and hex_part != hex_part.upper():
        return Web3.is_checksum_address(value)
    return True


def to_base_units(value: str, decimals: int = NATIVE_DECIMALS) -> int:
    """
    Convierte una cantidad decimal en texto a unidades base enteras.

    Args:
        value (str): Cantidad decimal no negativa, por ejemplo "1.5".
        decimals (int): Cantidad de decimales del token.

    Returns:
        int: La cantidad escalada por 10**decimals.

    Raises:
        ClientInputError: Si el texto no es un decimal válido o tiene más decimales
            de los permitidos, o si excede el máximo de un uint256.
    """
    match = _DECIMAL_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ClientInputError(f"Invalid amount: {value!r}")

    whole = match.group("whole")
    fraction = match.group("fraction") or ""
    if not whole and not fraction:
        raise ClientInputError(f"Invalid amount: {value!r}")
    if len(fraction) > decimals:
        raise ClientInputError(f"Invalid amount: {value!r} has more than {decimals} decimals")

    amount = int(whole or "0") * 10**decimals + int(fraction.ljust(decimals, "0") or "0")
    if amount > MAX_UINT256:
        raise ClientInputError(f"Invalid amount: {value!r} exceeds uint256")
    return amount


def from_base_units(value: int, decimals: int = NATIVE_DECIMALS) -> str:
    """
    Convierte unidades base enteras a una cantidad decimal en texto, sin pérdida de precisión.
    Siempre incluye parte fraccionaria ("1.0", "0.5").
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(int(value)), 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_str}"
