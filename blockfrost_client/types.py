"""
Core types shared by every resource.

Server presets and the listing options accepted by paginated endpoints.
"""

from dataclasses import dataclass

CARDANO_MAINNET = "https://cardano-mainnet.blockfrost.io/api/v0"
CARDANO_TESTNET = "https://cardano-testnet.blockfrost.io/api/v0"
CARDANO_PREPROD = "https://cardano-preprod.blockfrost.io/api/v0"
CARDANO_PREVIEW = "https://cardano-preview.blockfrost.io/api/v0"
IPFS = "https://ipfs.blockfrost.io/api/v0"

MAX_PAGE_SIZE = 100
ORDER_ASC = "asc"
ORDER_DESC = "desc"


@dataclass(frozen=True)
class ListingOptions:
    """
    Knobs for paginated endpoints.

    Zero values are omitted from the query string, so ListingOptions()
    asks the server for its default first page. `from_` is sent as `from`.
    """
    count: int = 0
    page: int = 0
    order: str = ""
    from_: str = ""
    to: str = ""
