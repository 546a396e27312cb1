from unittest.mock import AsyncMock

import pytest
from web3 import Web3

from pulse_api.core.constants import TOKENS
from pulse_api.core.errors import UpstreamError
from pulse_api.services.price_service import collapse_path, get_price, quote

WPLS = Web3.to_checksum_address(TOKENS["WPLS"])
DAI = Web3.to_checksum_address(TOKENS["DAI"])
PLSX = Web3.to_checksum_address(TOKENS["PLSX"])


def test_collapse_path():
    assert collapse_path([PLSX, WPLS, DAI]) == [PLSX, WPLS, DAI]
    assert collapse_path([WPLS, WPLS, DAI]) == [WPLS, DAI]
    assert collapse_path([WPLS, WPLS]) == [WPLS]


@pytest.mark.asyncio
async def test_quote_identity_skips_remote_call():
    client = AsyncMock()
    assert await quote(client, 7, [WPLS, WPLS]) == 7
    client.get_amounts_out.assert_not_called()


@pytest.mark.asyncio
async def test_quote_takes_last_amount():
    client = AsyncMock()
    client.get_amounts_out.return_value = [10, 20, 30]
    assert await quote(client, 10, [PLSX, WPLS, DAI]) == 30


@pytest.mark.asyncio
async def test_get_price_fails_when_one_quote_fails():
    client = AsyncMock()

    async def amounts_out(amount_in, path):
        if DAI in path:
            raise UpstreamError("execution reverted")
        return [amount_in, 2 * amount_in]

    client.get_amounts_out.side_effect = amounts_out
    with pytest.raises(UpstreamError):
        await get_price(client, PLSX, "1")
