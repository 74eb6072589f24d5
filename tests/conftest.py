"""
Shared fixtures:
- Deterministic secp256k1 test key, wallet and on-chain account
- Sample builder parameters for every supported message kind
"""

import pytest

from provenance_client.crypto import Secp256k1KeyPair, Wallet
from provenance_client.proto import BaseAccount
from provenance_client.tx import MessageKind

# 0x0102...20, well inside the secp256k1 scalar range
TEST_PRIVATE_KEY = bytes(range(1, 33))
TEST_CHAIN_ID = "pio-testnet-1"


@pytest.fixture
def key_pair():
    """Deterministic secp256k1 key pair."""
    return Secp256k1KeyPair(TEST_PRIVATE_KEY)


@pytest.fixture
def wallet():
    """Wallet derived from the deterministic test key."""
    return Wallet.from_private_key(TEST_PRIVATE_KEY)


@pytest.fixture
def base_account():
    """Signer account as an account query would return it."""
    return BaseAccount(address="tp1signer", account_number=42, sequence=7)


@pytest.fixture
def chain_id():
    return TEST_CHAIN_ID


@pytest.fixture
def sample_params():
    """Valid builder parameters (camelCase, as wallets send them) for every message kind."""
    coin = {"denom": "nhash", "amount": 1000}
    return {
        MessageKind.SEND: {
            "fromAddress": "tp1from",
            "toAddress": "tp1to",
            "amountList": [{"denom": "nhash", "amount": 100}, {"denom": "nhash", "amount": "50"}],
        },
        MessageKind.EXECUTE_CONTRACT: {
            "sender": "tp1sender",
            "contract": "tp1contract",
            "msg": {"swap": {"amount": "5"}},
            "fundsList": [coin],
        },
        MessageKind.GRANT: {
            "granter": "tp1granter",
            "grantee": "tp1grantee",
            "msgTypeUrl": "/cosmos.bank.v1beta1.MsgSend",
            "expiration": 1700000000,
        },
        MessageKind.VERIFY_INVARIANT: {
            "sender": "tp1sender",
            "invariantModuleName": "bank",
            "invariantRoute": "total-supply",
        },
        MessageKind.SET_WITHDRAW_ADDRESS: {"delegatorAddress": "tp1del", "withdrawAddress": "tp1withdraw"},
        MessageKind.WITHDRAW_DELEGATOR_REWARD: {"delegatorAddress": "tp1del", "validatorAddress": "tpvaloper1val"},
        MessageKind.WITHDRAW_VALIDATOR_COMMISSION: {"validatorAddress": "tpvaloper1val"},
        MessageKind.FUND_COMMUNITY_POOL: {"amountList": [coin], "depositor": "tp1depositor"},
        MessageKind.SUBMIT_EVIDENCE: {
            "submitter": "tp1submitter",
            "evidence": {"typeUrl": "/cosmos.evidence.v1beta1.Equivocation", "value": "CgE="},
        },
        MessageKind.SUBMIT_PROPOSAL: {
            "title": "Raise block gas",
            "description": "Double the block gas limit",
            "initialDepositList": [coin],
            "proposer": "tp1proposer",
        },
        MessageKind.VOTE: {"proposalId": 7, "voter": "tp1voter", "option": "VOTE_OPTION_YES"},
        MessageKind.VOTE_WEIGHTED: {
            "proposalId": 7,
            "voter": "tp1voter",
            "optionsList": [
                {"option": 1, "weight": "0.7"},
                {"option": "VOTE_OPTION_NO", "weight": "0.3"},
            ],
        },
        MessageKind.DEPOSIT: {"proposalId": 7, "depositor": "tp1depositor", "amountList": [coin]},
        MessageKind.UNJAIL: {"validatorAddr": "tpvaloper1val"},
        MessageKind.CREATE_VALIDATOR: {
            "description": {"moniker": "node-1", "website": "https://node.example"},
            "commission": {"rate": "0.1", "maxRate": "0.2", "maxChangeRate": "0.01"},
            "minSelfDelegation": "1",
            "delegatorAddress": "tp1del",
            "validatorAddress": "tpvaloper1val",
            "pubkey": bytes(range(32)),
            "value": coin,
        },
        MessageKind.EDIT_VALIDATOR: {"validatorAddress": "tpvaloper1val", "commissionRate": "0.05"},
        MessageKind.DELEGATE: {"delegatorAddress": "tp1del", "validatorAddress": "tpvaloper1val", "amount": coin},
        MessageKind.BEGIN_REDELEGATE: {
            "delegatorAddress": "tp1del",
            "validatorSrcAddress": "tpvaloper1src",
            "validatorDstAddress": "tpvaloper1dst",
            "amount": coin,
        },
        MessageKind.UNDELEGATE: {"delegatorAddress": "tp1del", "validatorAddress": "tpvaloper1val", "amount": coin},
        MessageKind.CREATE_VESTING_ACCOUNT: {
            "fromAddress": "tp1from",
            "toAddress": "tp1to",
            "amountList": [coin],
            "endTime": 1800000000,
            "delayed": True,
        },
        MessageKind.ADD_MARKER: {
            "amount": {"denom": "mycoin", "amount": 1000000},
            "manager": "tp1manager",
            "fromAddress": "tp1from",
            "status": "MARKER_STATUS_PROPOSED",
            "markerType": "MARKER_TYPE_RESTRICTED",
            "accessListList": [{"address": "tp1manager", "permissionsList": ["ACCESS_MINT", "ACCESS_ADMIN"]}],
            "supplyFixed": True,
            "requiredAttributesList": ["kyc.pb"],
        },
        MessageKind.ACTIVATE_MARKER: {"denom": "mycoin", "administrator": "tp1manager"},
        MessageKind.FINALIZE_MARKER: {"denom": "mycoin", "administrator": "tp1manager"},
    }
