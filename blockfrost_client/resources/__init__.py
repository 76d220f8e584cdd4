from .base import Amount, BlockfrostModel, ResourceMixin, address_str, cbor_bytes, decode
from .health import Health, HealthClock, HealthMixin, Info
from .metrics import Metric, MetricsEndpoint, MetricsMixin
from .accounts import (
    Account,
    AccountAddress,
    AccountAsset,
    AccountDelegation,
    AccountHistory,
    AccountMIR,
    AccountRegistration,
    AccountReward,
    AccountsMixin,
    AccountWithdrawal,
)
from .addresses import Address, AddressDetails, AddressesMixin, AddressTransaction, AddressUTXO
from .assets import Asset, AssetAddress, AssetHistory, AssetListing, AssetsMixin, AssetTransaction
from .blocks import Block, BlockAffectedAddress, BlocksMixin, BlockTransactionRef
from .epochs import Epoch, EpochParameters, EpochsMixin, EpochStake
from .ledger import GenesisBlock, LedgerMixin
from .network import NetworkInfo, NetworkMixin, NetworkStake, NetworkSupply
from .mempool import MempoolEntry, MempoolMixin, MempoolTransaction, MempoolTransactionContent
from .metadata import MetadataCBOR, MetadataJSON, MetadataLabel, MetadataMixin
from .nutlink import AddressTickerRecord, NutlinkAddress, NutlinkMetadata, NutlinkMixin, Ticker, TickerRecord
from .pools import Pool, PoolDelegator, PoolHistory, PoolMetadata, PoolRelay, PoolRetirement, PoolsMixin, PoolUpdate
from .scripts import Datum, Script, ScriptCBOR, ScriptJSON, ScriptRedeemer, ScriptRef, ScriptsMixin
from .transactions import (
    AdditionalUtxo,
    EvaluationResponse,
    TransactionContent,
    TransactionDelegation,
    TransactionMetadata,
    TransactionMetadataCBOR,
    TransactionMIR,
    TransactionPoolRetire,
    TransactionPoolUpdate,
    TransactionRedeemer,
    TransactionsMixin,
    TransactionStake,
    TransactionUTXOs,
    TransactionWithdrawal,
    TxIn,
    TxOut,
    Value,
)
from .ipfs import IPFSMixin, IPFSObject, IPFSPinnedObject

__all__ = [
    "Amount", "BlockfrostModel", "ResourceMixin", "address_str", "cbor_bytes", "decode",
    "Info", "Health", "HealthClock", "HealthMixin",
    "Metric", "MetricsEndpoint", "MetricsMixin",
    "Account", "AccountAddress", "AccountAsset", "AccountDelegation", "AccountHistory",
    "AccountMIR", "AccountRegistration", "AccountReward", "AccountWithdrawal", "AccountsMixin",
    "Address", "AddressDetails", "AddressTransaction", "AddressUTXO", "AddressesMixin",
    "Asset", "AssetAddress", "AssetHistory", "AssetListing", "AssetTransaction", "AssetsMixin",
    "Block", "BlockAffectedAddress", "BlockTransactionRef", "BlocksMixin",
    "Epoch", "EpochParameters", "EpochStake", "EpochsMixin",
    "GenesisBlock", "LedgerMixin",
    "NetworkInfo", "NetworkStake", "NetworkSupply", "NetworkMixin",
    "MempoolEntry", "MempoolTransaction", "MempoolTransactionContent", "MempoolMixin",
    "MetadataCBOR", "MetadataJSON", "MetadataLabel", "MetadataMixin",
    "AddressTickerRecord", "NutlinkAddress", "NutlinkMetadata", "Ticker", "TickerRecord", "NutlinkMixin",
    "Pool", "PoolDelegator", "PoolHistory", "PoolMetadata", "PoolRelay", "PoolRetirement", "PoolUpdate", "PoolsMixin",
    "Datum", "Script", "ScriptCBOR", "ScriptJSON", "ScriptRedeemer", "ScriptRef", "ScriptsMixin",
    "AdditionalUtxo", "EvaluationResponse", "TransactionContent", "TransactionDelegation",
    "TransactionMetadata", "TransactionMetadataCBOR", "TransactionMIR", "TransactionPoolRetire",
    "TransactionPoolUpdate", "TransactionRedeemer", "TransactionStake", "TransactionUTXOs",
    "TransactionWithdrawal", "TxIn", "TxOut", "Value", "TransactionsMixin",
    "IPFSObject", "IPFSPinnedObject", "IPFSMixin",
]
