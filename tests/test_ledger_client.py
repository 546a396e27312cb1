import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from web3 import Web3
from web3.exceptions import ContractLogicError

from pulse_api.core.constants import QUOTE_ROUTER, TOKENS
from pulse_api.core.errors import UpstreamError
from pulse_api.services.ledger_client import ABI, LedgerClient

WPLS = Web3.to_checksum_address(TOKENS["WPLS"])
DAI = Web3.to_checksum_address(TOKENS["DAI"])
ADDRESS = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


def make_client():
    w3 = MagicMock()
    return LedgerClient(w3), w3


def contract_call(w3, method):
    return getattr(w3.eth.contract.return_value.functions, method).return_value


@pytest.mark.asyncio
async def test_get_native_balance():
    client, w3 = make_client()
    w3.eth.get_balance = AsyncMock(return_value=42)
    assert await client.get_native_balance(ADDRESS) == 42
    w3.eth.get_balance.assert_awaited_once_with(ADDRESS)


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    aiohttp.ClientConnectionError("Connection refused"),
    asyncio.TimeoutError(),
    ValueError({"code": -32000, "message": "header not found"}),
])
async def test_get_native_balance_upstream_error(error):
    client, w3 = make_client()
    w3.eth.get_balance = AsyncMock(side_effect=error)
    with pytest.raises(UpstreamError) as exc_info:
        await client.get_native_balance(ADDRESS)
    assert exc_info.value.status_code == 500
    assert exc_info.value.message


@pytest.mark.asyncio
async def test_read_contract():
    client, w3 = make_client()
    contract_call(w3, "symbol").call = AsyncMock(return_value="DAI")
    assert await client.read_contract(DAI, "erc20", "symbol") == "DAI"
    w3.eth.contract.assert_called_once_with(address=DAI, abi=ABI["erc20"])


@pytest.mark.asyncio
async def test_read_contract_reuses_contract_object():
    client, w3 = make_client()
    contract_call(w3, "name").call = AsyncMock(return_value="Dai")
    contract_call(w3, "decimals").call = AsyncMock(return_value=18)
    await client.read_contract(DAI, "erc20", "name")
    await client.read_contract(DAI, "erc20", "decimals")
    assert w3.eth.contract.call_count == 1


@pytest.mark.asyncio
async def test_get_amounts_out():
    client, w3 = make_client()
    contract_call(w3, "getAmountsOut").call = AsyncMock(return_value=[10**18, 5 * 10**17])
    amounts = await client.get_amounts_out(10**18, [WPLS, DAI])
    assert amounts == [10**18, 5 * 10**17]
    w3.eth.contract.assert_called_once_with(
        address=Web3.to_checksum_address(QUOTE_ROUTER), abi=ABI["swap_router"]
    )
    w3.eth.contract.return_value.functions.getAmountsOut.assert_called_once_with(10**18, [WPLS, DAI])


@pytest.mark.asyncio
async def test_get_amounts_out_revert():
    client, w3 = make_client()
    contract_call(w3, "getAmountsOut").call = AsyncMock(
        side_effect=ContractLogicError("execution reverted: PulseXLibrary: INSUFFICIENT_LIQUIDITY")
    )
    with pytest.raises(UpstreamError) as exc_info:
        await client.get_amounts_out(10**18, [WPLS, DAI])
    assert "INSUFFICIENT_LIQUIDITY" in exc_info.value.message


@pytest.mark.asyncio
async def test_get_amounts_out_malformed_response():
    client, w3 = make_client()
    contract_call(w3, "getAmountsOut").call = AsyncMock(return_value=[10**18])
    with pytest.raises(UpstreamError):
        await client.get_amounts_out(10**18, [WPLS, DAI])


@pytest.mark.asyncio
async def test_close_disconnects_provider():
    client, w3 = make_client()
    w3.provider.disconnect = AsyncMock()
    await client.close()
    w3.provider.disconnect.assert_awaited_once()
