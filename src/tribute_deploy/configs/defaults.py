"""Default values of the options the contract descriptors refer to."""

from typing import Any, Dict

from ..utils.ids import ETH_TOKEN, UNITS

ONE_ETHER = 10 ** 18

UNIT_PRICE = ONE_ETHER // 10
NUMBER_OF_UNITS = 100_000
MAXIMUM_CHUNKS = 11
MAX_AMOUNT = ONE_ETHER
MAX_UNITS = 10 * ONE_ETHER

DEFAULT_OPTIONS: Dict[str, Any] = {
    "unitPrice": UNIT_PRICE,
    "nbUnits": NUMBER_OF_UNITS,
    "votingPeriod": 10,
    "gracePeriod": 1,
    "tokenAddr": ETH_TOKEN,
    "maxChunks": MAXIMUM_CHUNKS,
    "maxAmount": MAX_AMOUNT,
    "maxUnits": MAX_UNITS,
    "chainId": 1,
    "maxExternalTokens": 100,
    "couponCreatorAddress": "0x7D8cad0bbD68deb352C33e80fccd4D8e88b4aBb8",
    "kycMaxMembers": 1000,
    "kycSignerAddress": "0x7D8cad0bbD68deb352C33e80fccd4D8e88b4aBb8",
    "kycFundTargetAddress": "0x823A19521A76f80EC49670BE32950900E8Cd0ED3",
    "erc20TokenName": "Test Token",
    "erc20TokenSymbol": "TTK",
    "erc20TokenDecimals": 0,
    "erc20TokenAddress": UNITS,
    "supplyTestToken1": 1_000_000,
    "supplyTestToken2": 1_000_000,
    "supplyPixelNFT": 100,
    "supplyOLToken": 1_000_000 * ONE_ETHER,
    "erc1155TestTokenUri": "1155 test token",
    "maintainerTokenAddress": UNITS,
    "deployTestTokens": False,
    "offchainVoting": False,
    "finalize": True,
}
