"""Stake account endpoints (/accounts/{stake_address}/...)."""

from typing import List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin


class Account(BlockfrostModel):
    stake_address: str = ""
    active: bool = False
    active_epoch: Optional[int] = None
    controlled_amount: str = ""
    rewards_sum: str = ""
    withdrawals_sum: str = ""
    reserves_sum: str = ""
    treasury_sum: str = ""
    withdrawable_amount: str = ""
    pool_id: Optional[str] = None


class AccountReward(BlockfrostModel):
    epoch: int = 0
    amount: str = ""
    pool_id: str = ""


class AccountHistory(BlockfrostModel):
    active_epoch: int = 0
    amount: str = ""
    pool_id: str = ""


class AccountDelegation(BlockfrostModel):
    active_epoch: int = 0
    tx_hash: str = ""
    amount: str = ""
    pool_id: str = ""


class AccountRegistration(BlockfrostModel):
    tx_hash: str = ""
    action: str = ""  # registered | deregistered


class AccountWithdrawal(BlockfrostModel):
    tx_hash: str = ""
    amount: str = ""


class AccountMIR(BlockfrostModel):
    tx_hash: str = ""
    amount: str = ""


class AccountAddress(BlockfrostModel):
    address: str = ""


class AccountAsset(BlockfrostModel):
    unit: str = ""
    quantity: str = ""


class AccountsMixin(ResourceMixin):

    async def account(self, stake_address: str) -> Account:
        return await self._get(Account, "accounts", stake_address)

    async def account_rewards(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountReward]:
        """Reward history, one entry per epoch."""
        return await self._get(List[AccountReward], "accounts", stake_address, "rewards", options=options)

    def account_rewards_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_rewards(stake_address, o))

    async def account_history(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountHistory]:
        """Active stake per epoch."""
        return await self._get(List[AccountHistory], "accounts", stake_address, "history", options=options)

    def account_history_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_history(stake_address, o))

    async def account_delegations(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountDelegation]:
        return await self._get(List[AccountDelegation], "accounts", stake_address, "delegations", options=options)

    def account_delegations_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_delegations(stake_address, o))

    async def account_registrations(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountRegistration]:
        return await self._get(List[AccountRegistration], "accounts", stake_address, "registrations", options=options)

    def account_registrations_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_registrations(stake_address, o))

    async def account_withdrawals(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountWithdrawal]:
        return await self._get(List[AccountWithdrawal], "accounts", stake_address, "withdrawals", options=options)

    def account_withdrawals_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_withdrawals(stake_address, o))

    async def account_mirs(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountMIR]:
        """Move-instantaneous-rewards history."""
        return await self._get(List[AccountMIR], "accounts", stake_address, "mirs", options=options)

    def account_mirs_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_mirs(stake_address, o))

    async def account_addresses(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountAddress]:
        """Payment addresses associated with the stake key."""
        return await self._get(List[AccountAddress], "accounts", stake_address, "addresses", options=options)

    def account_addresses_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_addresses(stake_address, o))

    async def account_addresses_assets(self, stake_address: str, options: Optional[ListingOptions] = None) -> List[AccountAsset]:
        """Assets held across every associated address."""
        return await self._get(List[AccountAsset], "accounts", stake_address, "addresses", "assets", options=options)

    def account_addresses_assets_all(self, stake_address: str) -> FanOut:
        return self._all(lambda o: self.account_addresses_assets(stake_address, o))
