"""
Financing adapter scenarios on a freshly deployed DAO.

Run with:
    TRIBUTE_E2E_RPC_URL=http://127.0.0.1:8545 TRIBUTE_ARTIFACTS_DIR=build/contracts \
        pytest tests/e2e/ -v
"""

import os

import pytest

from tribute_deploy.base.descriptor import find_by_name
from tribute_deploy.configs.contracts import CONTRACT_CONFIGS
from tribute_deploy.exceptions import ChainCallError
from tribute_deploy.testing import (
    ETH_TOKEN,
    GUILD,
    UNIT_PRICE,
    UNITS,
    advance_time,
    deploy_default_dao,
    entry_bank,
    entry_dao,
    sha3,
)

pytestmark = pytest.mark.e2e

REMAINING = UNIT_PRICE - 50_000_000_000_000
ONBOARDING_AMOUNT = UNIT_PRICE * 10 + REMAINING
EXPECTED_GUILD_BALANCE = 1_200_000_000_000_000_000
REQUESTED_AMOUNT = 50_000


def onboard(w3, dao, adapters, owner, new_member, proposal_id):
    """Sponsor ``new_member`` so the guild bank holds funds to finance proposals."""
    onboarding = adapters["onboarding"]
    onboarding.transact(
        "submitProposal", dao.address, proposal_id, new_member, UNITS, ONBOARDING_AMOUNT, b"",
        sender=owner,
    )
    adapters["voting"].transact("submitVote", dao.address, proposal_id, 1, sender=owner)
    advance_time(w3, 10000)
    onboarding.transact(
        "processProposal", dao.address, proposal_id, sender=owner, value=ONBOARDING_AMOUNT,
    )


def balance(bank, member):
    return bank.call("balanceOf", member, ETH_TOKEN)


class TestFinancing:

    def test_passing_proposal_releases_funds(self, w3, snapshot, accounts, owner, proposal_ids):
        dao, adapters, bank = snapshot.dao, snapshot.adapters, snapshot.extensions["bank"]
        applicant, new_member = accounts[2], accounts[3]

        onboard(w3, dao, adapters, owner, new_member, proposal_ids.next())
        assert balance(bank, GUILD) == EXPECTED_GUILD_BALANCE

        proposal_id = proposal_ids.next()
        adapters["financing"].transact(
            "submitProposal", dao.address, proposal_id, applicant, ETH_TOKEN, REQUESTED_AMOUNT, b"",
            sender=owner,
        )
        adapters["voting"].transact("submitVote", dao.address, proposal_id, 1, sender=owner)
        assert balance(bank, applicant) == 0

        advance_time(w3, 10000)
        adapters["financing"].transact("processProposal", dao.address, proposal_id, sender=owner)

        assert balance(bank, GUILD) == EXPECTED_GUILD_BALANCE - REQUESTED_AMOUNT
        assert balance(bank, applicant) == REQUESTED_AMOUNT

        eth_before = w3.eth.get_balance(applicant)
        adapters["bankAdapter"].transact("withdraw", dao.address, applicant, ETH_TOKEN, sender=owner)
        assert balance(bank, applicant) == 0
        assert w3.eth.get_balance(applicant) == eth_before + REQUESTED_AMOUNT

    def test_failed_proposal_cannot_be_processed(self, w3, snapshot, accounts, owner, proposal_ids):
        dao, adapters = snapshot.dao, snapshot.adapters
        onboard(w3, dao, adapters, owner, accounts[3], proposal_ids.next())

        proposal_id = proposal_ids.next()
        adapters["financing"].transact(
            "submitProposal", dao.address, proposal_id, accounts[2], ETH_TOKEN, REQUESTED_AMOUNT, b"",
            sender=owner,
        )
        adapters["voting"].transact("submitVote", dao.address, proposal_id, 2, sender=owner)
        advance_time(w3, 10000)

        with pytest.raises(ChainCallError, match="proposal needs to pass"):
            adapters["financing"].transact("processProposal", dao.address, proposal_id, sender=owner)

    @pytest.mark.parametrize("token,amount,reason", [
        ("0x6941a80e1a034f57ed3b1d642fc58ddcb91e2596", REQUESTED_AMOUNT, "token not allowed"),
        (ETH_TOKEN, 0, "invalid requested amount"),
    ])
    def test_invalid_request(self, w3, snapshot, accounts, owner, proposal_ids, token, amount, reason):
        dao, adapters = snapshot.dao, snapshot.adapters
        onboard(w3, dao, adapters, owner, accounts[3], proposal_ids.next())

        with pytest.raises(ChainCallError, match=reason):
            adapters["financing"].transact(
                "submitProposal", dao.address, proposal_ids.next(), accounts[2], token, amount, b"",
                sender=owner,
            )

    def test_invalid_proposal_id(self, snapshot, accounts, owner):
        with pytest.raises(ChainCallError, match="invalid proposalId"):
            snapshot.adapters["financing"].transact(
                "submitProposal", snapshot.dao.address, "0x" + "00" * 32, accounts[2], ETH_TOKEN, 10, b"",
                sender=owner,
            )

    def test_proposal_id_is_unique(self, snapshot, accounts, owner, proposal_ids):
        dao, adapters = snapshot.dao, snapshot.adapters
        proposal_id = proposal_ids.next()
        adapters["onboarding"].transact(
            "submitProposal", dao.address, proposal_id, accounts[3], UNITS, ONBOARDING_AMOUNT, b"",
            sender=owner,
        )
        with pytest.raises(ChainCallError, match="proposalId must be unique"):
            adapters["financing"].transact(
                "submitProposal", dao.address, proposal_id, accounts[2], ETH_TOKEN, REQUESTED_AMOUNT, b"",
                sender=owner,
            )

    def test_unknown_proposal(self, snapshot, owner, proposal_ids):
        with pytest.raises(ChainCallError, match="adapter not found"):
            snapshot.adapters["financing"].transact(
                "processProposal", snapshot.dao.address, proposal_ids.next(), sender=owner,
            )


class TestFinancingChainlink:

    def test_adapter_added_before_finalization(self, w3, chain_client, artifacts, owner):
        result = deploy_default_dao(
            chain_client, owner, artifacts=artifacts,
            daoName=f"e2e-chainlink-{os.urandom(4).hex()}", finalize=False,
        )
        dao, dao_factory = result.dao, result.factories["daoFactory"]

        price_feed = chain_client.deploy(artifacts["FakeChainlinkPriceFeed"], sender=owner)
        financing = chain_client.deploy(
            artifacts["FinancingChainlinkContract"], [price_feed.address], sender=owner,
        )

        adapter_config = find_by_name(CONTRACT_CONFIGS, "FinancingChainlinkContract")
        dao_factory.transact(
            "addAdapters", dao.address,
            [entry_dao(adapter_config.id, financing.address, adapter_config.acls)],
            sender=owner,
        )
        dao_factory.transact(
            "configureExtension", dao.address, result.extensions["bank"].address,
            [entry_bank(financing.address, adapter_config.acls)],
            sender=owner,
        )
        dao.transact("finalizeDao", sender=owner)

        assert dao.call("getAdapterAddress", sha3("financing-chainlink")) == financing.address
