"""Request and response models for the gateway API.

Every handler answers with either its success model or ``ErrorResponse``.
The Python type tells the two apart; the JSON body carries only the fields
of the returned model, so clients distinguish them by shape.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, RootModel


class ErrorResponse(BaseModel):
    """Error variant shared by every endpoint."""

    error: str = Field(..., description="Human-readable error message")


class BalanceResponse(BaseModel):
    """Model for account balance responses."""

    balance: float = Field(..., description="Balance in SOL")


class AccountRecord(BaseModel):
    """Raw account as stored on the ledger."""

    lamports: int = Field(..., description="Balance in lamports")
    data: List[int] = Field(..., description="Account data as byte values")
    owner: str = Field(..., description="Owner program id")
    executable: bool = Field(..., description="Whether the account holds a program")
    rent_epoch: int = Field(..., description="Epoch at which rent is next due")


class BlockResponse(RootModel[Dict[str, Any]]):
    """Block record exactly as the node returned it."""


class AirdropRequest(BaseModel):
    """Body of an airdrop request."""

    pubkey: str = Field(..., description="Receiving account")
    amount: int = Field(..., ge=0, strict=True, description="Amount in whole SOL")


class AirdropResponse(BaseModel):
    """Model for a confirmed airdrop."""

    hash: str = Field(..., description="Airdrop transaction signature")


BalanceResult = Union[BalanceResponse, ErrorResponse]
AccountInfoResult = Union[AccountRecord, ErrorResponse]
BlockResult = Union[BlockResponse, ErrorResponse]
AirdropResult = Union[AirdropResponse, ErrorResponse]
