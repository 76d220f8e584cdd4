"""Account and address resources."""

import httpx
import pytest
from pycardano import Address

from blockfrost_client import ListingOptions, NotFound, collect_pages

from conftest import MAINNET_ADDRESS, STAKE_ADDRESS


@pytest.mark.asyncio
async def test_account(api, backend):
    backend.add(f"/accounts/{STAKE_ADDRESS}", {
        "stake_address": STAKE_ADDRESS,
        "active": True,
        "active_epoch": 412,
        "controlled_amount": "619154618165",
        "rewards_sum": "319154618165",
        "withdrawals_sum": "12125369253",
        "reserves_sum": "319154618165",
        "treasury_sum": "12000000",
        "withdrawable_amount": "319154618165",
        "pool_id": None,
    })

    account = await api.account(STAKE_ADDRESS)

    assert account.active is True
    assert account.active_epoch == 412
    assert account.controlled_amount == "619154618165"
    assert account.pool_id is None


@pytest.mark.asyncio
async def test_account_history_with_options(api, backend):
    backend.add(f"/accounts/{STAKE_ADDRESS}/history", [
        {"active_epoch": 210, "amount": "12695385", "pool_id": "pool1pu5jlj4q9w9jlxeu370a3c9myx47md5j5m2str0naunn2q3lkdy"},
    ])

    history = await api.account_history(STAKE_ADDRESS, ListingOptions(count=10, page=2, order="desc"))

    assert history[0].active_epoch == 210
    assert backend.last.url.path == f"/api/v0/accounts/{STAKE_ADDRESS}/history"
    assert dict(backend.last.url.params) == {"count": "10", "page": "2", "order": "desc"}


@pytest.mark.asyncio
async def test_account_registrations_and_mirs(api, backend):
    backend.add(f"/accounts/{STAKE_ADDRESS}/registrations", [
        {"tx_hash": "2dd15e0ef6e6a17841cb9541c27724072ce4d4b79b91e58432fbaa32d9572531", "action": "registered"},
    ])
    backend.add(f"/accounts/{STAKE_ADDRESS}/mirs", [
        {"tx_hash": "69705bba1d687a816ff5a04ec0c358a1f1ef075ab7f9c6cc2763e792581cec6d", "amount": "2193707473"},
    ])

    registrations = await api.account_registrations(STAKE_ADDRESS)
    mirs = await api.account_mirs(STAKE_ADDRESS)

    assert registrations[0].action == "registered"
    assert mirs[0].amount == "2193707473"


@pytest.mark.asyncio
async def test_account_addresses_assets_path(api, backend):
    backend.add(f"/accounts/{STAKE_ADDRESS}/addresses/assets", [
        {"unit": "d5e6bf0500378d4f0da4e8dde6becec7621cd8cbf5cbb9b87013d4cc537061636542756433343132", "quantity": "1"},
    ])

    assets = await api.account_addresses_assets(STAKE_ADDRESS)

    assert assets[0].quantity == "1"


@pytest.mark.asyncio
async def test_account_rewards_all(api, backend):
    def handler(request):
        page = int(request.url.params["page"])
        items = [{"epoch": e, "amount": "1", "pool_id": "pool1"} for e in range((page - 1) * 100, min(page * 100, 150))]
        return httpx.Response(200, json=items)

    backend.add_handler(f"/accounts/{STAKE_ADDRESS}/rewards", handler)

    rewards = await collect_pages(api.account_rewards_all(STAKE_ADDRESS))

    assert [r.epoch for r in rewards] == list(range(150))


@pytest.mark.asyncio
async def test_unknown_account_not_found(api):
    with pytest.raises(NotFound):
        await api.account("stake1unknown")


@pytest.mark.asyncio
async def test_address_accepts_pycardano_address(api, backend):
    backend.add(f"/addresses/{MAINNET_ADDRESS}", {
        "address": MAINNET_ADDRESS,
        "amount": [{"unit": "lovelace", "quantity": "42000000"}],
        "stake_address": None,
        "type": "shelley",
        "script": True,
    })

    address = await api.address(Address.from_primitive(MAINNET_ADDRESS))

    assert address.script is True
    assert address.amount[0].unit == "lovelace"
    assert address.stake_address is None


@pytest.mark.asyncio
async def test_address_total(api, backend):
    backend.add(f"/addresses/{MAINNET_ADDRESS}/total", {
        "address": MAINNET_ADDRESS,
        "received_sum": [{"unit": "lovelace", "quantity": "42000000"}],
        "sent_sum": [{"unit": "lovelace", "quantity": "42000000"}],
        "tx_count": 12,
    })

    total = await api.address_total(MAINNET_ADDRESS)

    assert total.tx_count == 12


@pytest.mark.asyncio
async def test_address_transactions_range(api, backend):
    backend.add(f"/addresses/{MAINNET_ADDRESS}/transactions", [
        {"tx_hash": "8788591983aa73981fc92d6cddbbe643959f5a784e84b8bee0db15823f575a5b", "tx_index": 6,
         "block_height": 69, "block_time": 1635505891},
    ])

    txs = await api.address_transactions(MAINNET_ADDRESS, ListingOptions(from_="8929261", to="9999269:10"))

    assert txs[0].block_height == 69
    assert backend.last.url.params["from"] == "8929261"
    assert backend.last.url.params["to"] == "9999269:10"


@pytest.mark.asyncio
async def test_address_utxos_asset(api, backend):
    unit = "b0d07d45fe9514f80213f4020e5a61241458be626841cde717cb38a7e0e6fec4"
    backend.add(f"/addresses/{MAINNET_ADDRESS}/utxos/{unit}", [
        {"tx_hash": "39a7a284c2a0948189dc45dec670211cd4d72f7b66c5726c08d9b3df11e44d58", "output_index": 0,
         "amount": [{"unit": unit, "quantity": "1"}], "block": "7eb8e27d18686c7db9a18f8bbcfe34e3fed6e047afaa2d969904d15e934847e6",
         "data_hash": None, "inline_datum": None, "reference_script_hash": None},
    ])

    utxos = await api.address_utxos_asset(MAINNET_ADDRESS, unit)

    assert utxos[0].amount[0].unit == unit
    assert utxos[0].data_hash is None


@pytest.mark.asyncio
async def test_address_utxos_all(api, backend):
    def handler(request):
        page = int(request.url.params["page"])
        return httpx.Response(200, json=[{"tx_hash": f"h{page}", "output_index": 0}] if page == 1 else [])

    backend.add_handler(f"/addresses/{MAINNET_ADDRESS}/utxos", handler)

    utxos = await collect_pages(api.address_utxos_all(MAINNET_ADDRESS))

    assert [u.tx_hash for u in utxos] == ["h1"]
