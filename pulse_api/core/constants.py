RPC_URL = "https://rpc.pulsechain.com"

NATIVE_DECIMALS = 18

MAX_UINT256 = 2**256 - 1

CONTRACTS = {
    "swap_router_01": "0x98bf93ebf5c380C0e6Ae8e192A7e2AE08edAcc02",
    "swap_router_02": "0x165C3410fC91EF562C50559f7d2289fEbed552d9",
}

# Router usado para las cotizaciones
QUOTE_ROUTER = CONTRACTS["swap_router_02"]

TOKENS = {
    "DAI": "0xefD766cCb38EaF1dfd701853BFCe31359239F305",
    "USDC": "0x15D38573d2feeb82e7ad5187aB8c1D52810B1f07",
    "USDT": "0x0Cb6F5a34ad42ec934882A05265A7d5F59b51A2f",
    "WBTC": "0xb17D901469B9208B17d916112988A3FeD19b5cA1",
    "WPLS": "0xA1077a294dDE1B09bB078844df40758a5D0f9a27",
    "ISLAND": "0xDFB10795E6fE7D0Db68F9778Ba4C575a28E8Cd4c",
    "ZKZX": "0x319e55Be473C77C35316651995C048a415219604",
    "GOAT": "0xF5D0140B4d53c9476DC1488BC6d8597d7393f074",
    "PLSX": "0x95B303987A60C71504D99Aa1b13B4DA07b0790ab",
    "PRS": "0xb6B57227150a7097723e0C013752001AaD01248F",
    "IMPLS": "0x5f63BC3d5bd234946f18d24e98C324f629D9d60e",
    "USDL": "0x0dEEd1486bc52aA0d3E6f8849cEC5adD6598A162",
    "LOAN": "0x9159f1D2a9f51998Fc9Ab03fbd8f265ab14A1b3B",
}

INVALID_ADDRESS_MESSAGE = "Invalid Ethereum address"
ROOT_MESSAGE = "Pulsechain Price API - Active!"
