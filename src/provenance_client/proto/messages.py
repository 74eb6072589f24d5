"""
Transaction message schemas: bank, staking, distribution, gov, slashing,
crisis, evidence, authz, vesting, cosmwasm and provenance marker.
"""

from enum import IntEnum
from typing import ClassVar, List, Optional

from ..codec.message import ProtoMessage, proto_field
from .base import Coin, GenericMessage, Timestamp


# =============================================================================
# Enumerations
# =============================================================================

class VoteOption(IntEnum):
    """cosmos.gov.v1beta1.VoteOption"""

    VOTE_OPTION_UNSPECIFIED = 0
    VOTE_OPTION_YES = 1
    VOTE_OPTION_ABSTAIN = 2
    VOTE_OPTION_NO = 3
    VOTE_OPTION_NO_WITH_VETO = 4


class MarkerStatus(IntEnum):
    """provenance.marker.v1.MarkerStatus"""

    MARKER_STATUS_UNSPECIFIED = 0
    MARKER_STATUS_PROPOSED = 1
    MARKER_STATUS_FINALIZED = 2
    MARKER_STATUS_ACTIVE = 3
    MARKER_STATUS_CANCELLED = 4
    MARKER_STATUS_DESTROYED = 5


class MarkerType(IntEnum):
    """provenance.marker.v1.MarkerType"""

    MARKER_TYPE_UNSPECIFIED = 0
    MARKER_TYPE_COIN = 1
    MARKER_TYPE_RESTRICTED = 2


class Access(IntEnum):
    """provenance.marker.v1.Access permission bits"""

    ACCESS_UNSPECIFIED = 0
    ACCESS_MINT = 1
    ACCESS_BURN = 2
    ACCESS_DEPOSIT = 3
    ACCESS_WITHDRAW = 4
    ACCESS_DELETE = 5
    ACCESS_ADMIN = 6
    ACCESS_TRANSFER = 7


# =============================================================================
# Bank
# =============================================================================

class MsgSend(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.bank.v1beta1.MsgSend"

    from_address: str = proto_field(1, "string")
    to_address: str = proto_field(2, "string")
    amount: List[Coin] = proto_field(3, "message", repeated=True)


# =============================================================================
# Staking
# =============================================================================

class Description(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.Description"

    moniker: str = proto_field(1, "string")
    identity: str = proto_field(2, "string")
    website: str = proto_field(3, "string")
    security_contact: str = proto_field(4, "string")
    details: str = proto_field(5, "string")


class CommissionRates(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.CommissionRates"

    rate: str = proto_field(1, "string")
    max_rate: str = proto_field(2, "string")
    max_change_rate: str = proto_field(3, "string")


class MsgCreateValidator(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.MsgCreateValidator"

    description: Optional[Description] = proto_field(1, "message")
    commission: Optional[CommissionRates] = proto_field(2, "message")
    min_self_delegation: str = proto_field(3, "string")
    delegator_address: str = proto_field(4, "string")
    validator_address: str = proto_field(5, "string")
    pubkey: Optional[GenericMessage] = proto_field(6, "message")
    value: Optional[Coin] = proto_field(7, "message")


class MsgEditValidator(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.MsgEditValidator"

    description: Optional[Description] = proto_field(1, "message")
    validator_address: str = proto_field(2, "string")
    commission_rate: str = proto_field(3, "string")
    min_self_delegation: str = proto_field(4, "string")


class MsgDelegate(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.MsgDelegate"

    delegator_address: str = proto_field(1, "string")
    validator_address: str = proto_field(2, "string")
    amount: Optional[Coin] = proto_field(3, "message")


class MsgUndelegate(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.MsgUndelegate"

    delegator_address: str = proto_field(1, "string")
    validator_address: str = proto_field(2, "string")
    amount: Optional[Coin] = proto_field(3, "message")


class MsgBeginRedelegate(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.staking.v1beta1.MsgBeginRedelegate"

    delegator_address: str = proto_field(1, "string")
    validator_src_address: str = proto_field(2, "string")
    validator_dst_address: str = proto_field(3, "string")
    amount: Optional[Coin] = proto_field(4, "message")


# =============================================================================
# Distribution
# =============================================================================

class MsgSetWithdrawAddress(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.distribution.v1beta1.MsgSetWithdrawAddress"

    delegator_address: str = proto_field(1, "string")
    withdraw_address: str = proto_field(2, "string")


class MsgWithdrawDelegatorReward(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.distribution.v1beta1.MsgWithdrawDelegatorReward"

    delegator_address: str = proto_field(1, "string")
    validator_address: str = proto_field(2, "string")


class MsgWithdrawValidatorCommission(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.distribution.v1beta1.MsgWithdrawValidatorCommission"

    validator_address: str = proto_field(1, "string")


class MsgFundCommunityPool(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.distribution.v1beta1.MsgFundCommunityPool"

    amount: List[Coin] = proto_field(1, "message", repeated=True)
    depositor: str = proto_field(2, "string")


# =============================================================================
# Gov
# =============================================================================

class TextProposal(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.gov.v1beta1.TextProposal"

    title: str = proto_field(1, "string")
    description: str = proto_field(2, "string")


class MsgSubmitProposal(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.gov.v1beta1.MsgSubmitProposal"

    content: Optional[GenericMessage] = proto_field(1, "message")
    initial_deposit: List[Coin] = proto_field(2, "message", repeated=True)
    proposer: str = proto_field(3, "string")


class MsgVote(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.gov.v1beta1.MsgVote"

    proposal_id: int = proto_field(1, "uint64")
    voter: str = proto_field(2, "string")
    option: int = proto_field(3, "enum")


class WeightedVoteOption(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.gov.v1beta1.WeightedVoteOption"

    option: int = proto_field(1, "enum")
    weight: str = proto_field(2, "string")


class MsgVoteWeighted(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.gov.v1beta1.MsgVoteWeighted"

    proposal_id: int = proto_field(1, "uint64")
    voter: str = proto_field(2, "string")
    options: List[WeightedVoteOption] = proto_field(3, "message", repeated=True)


class MsgDeposit(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.gov.v1beta1.MsgDeposit"

    proposal_id: int = proto_field(1, "uint64")
    depositor: str = proto_field(2, "string")
    amount: List[Coin] = proto_field(3, "message", repeated=True)


# =============================================================================
# Slashing, crisis, evidence
# =============================================================================

class MsgUnjail(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.slashing.v1beta1.MsgUnjail"

    validator_addr: str = proto_field(1, "string")


class MsgVerifyInvariant(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.crisis.v1beta1.MsgVerifyInvariant"

    sender: str = proto_field(1, "string")
    invariant_module_name: str = proto_field(2, "string")
    invariant_route: str = proto_field(3, "string")


class MsgSubmitEvidence(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.evidence.v1beta1.MsgSubmitEvidence"

    submitter: str = proto_field(1, "string")
    evidence: Optional[GenericMessage] = proto_field(2, "message")


# =============================================================================
# Authz and vesting
# =============================================================================

class GenericAuthorization(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.authz.v1beta1.GenericAuthorization"

    msg: str = proto_field(1, "string")


class Grant(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.authz.v1beta1.Grant"

    authorization: Optional[GenericMessage] = proto_field(1, "message")
    expiration: Optional[Timestamp] = proto_field(2, "message")


class MsgGrant(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.authz.v1beta1.MsgGrant"

    granter: str = proto_field(1, "string")
    grantee: str = proto_field(2, "string")
    grant: Optional[Grant] = proto_field(3, "message")


class MsgCreateVestingAccount(ProtoMessage):
    type_name: ClassVar[str] = "cosmos.vesting.v1beta1.MsgCreateVestingAccount"

    from_address: str = proto_field(1, "string")
    to_address: str = proto_field(2, "string")
    amount: List[Coin] = proto_field(3, "message", repeated=True)
    end_time: int = proto_field(4, "int64")
    delayed: bool = proto_field(5, "bool")


# =============================================================================
# CosmWasm
# =============================================================================

class MsgExecuteContract(ProtoMessage):
    type_name: ClassVar[str] = "cosmwasm.wasm.v1.MsgExecuteContract"

    sender: str = proto_field(1, "string")
    contract: str = proto_field(2, "string")
    msg: bytes = proto_field(3, "bytes")
    funds: List[Coin] = proto_field(5, "message", repeated=True)


# =============================================================================
# Provenance marker
# =============================================================================

class AccessGrant(ProtoMessage):
    type_name: ClassVar[str] = "provenance.marker.v1.AccessGrant"

    address: str = proto_field(1, "string")
    permissions: List[int] = proto_field(2, "enum", repeated=True)


class MsgAddMarkerRequest(ProtoMessage):
    type_name: ClassVar[str] = "provenance.marker.v1.MsgAddMarkerRequest"

    amount: Optional[Coin] = proto_field(1, "message")
    manager: str = proto_field(3, "string")
    from_address: str = proto_field(4, "string")
    status: int = proto_field(5, "enum")
    marker_type: int = proto_field(6, "enum")
    access_list: List[AccessGrant] = proto_field(7, "message", repeated=True)
    supply_fixed: bool = proto_field(8, "bool")
    allow_governance_control: bool = proto_field(9, "bool")
    allow_forced_transfer: bool = proto_field(10, "bool")
    required_attributes: List[str] = proto_field(11, "string", repeated=True)


class MsgActivateRequest(ProtoMessage):
    type_name: ClassVar[str] = "provenance.marker.v1.MsgActivateRequest"

    denom: str = proto_field(1, "string")
    administrator: str = proto_field(2, "string")


class MsgFinalizeRequest(ProtoMessage):
    type_name: ClassVar[str] = "provenance.marker.v1.MsgFinalizeRequest"

    denom: str = proto_field(1, "string")
    administrator: str = proto_field(2, "string")


__all__ = [
    "VoteOption",
    "MarkerStatus",
    "MarkerType",
    "Access",
    "MsgSend",
    "Description",
    "CommissionRates",
    "MsgCreateValidator",
    "MsgEditValidator",
    "MsgDelegate",
    "MsgUndelegate",
    "MsgBeginRedelegate",
    "MsgSetWithdrawAddress",
    "MsgWithdrawDelegatorReward",
    "MsgWithdrawValidatorCommission",
    "MsgFundCommunityPool",
    "TextProposal",
    "MsgSubmitProposal",
    "MsgVote",
    "WeightedVoteOption",
    "MsgVoteWeighted",
    "MsgDeposit",
    "MsgUnjail",
    "MsgVerifyInvariant",
    "MsgSubmitEvidence",
    "GenericAuthorization",
    "Grant",
    "MsgGrant",
    "MsgCreateVestingAccount",
    "MsgExecuteContract",
    "AccessGrant",
    "MsgAddMarkerRequest",
    "MsgActivateRequest",
    "MsgFinalizeRequest",
]
