from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ExistingTransaction(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: str
    amount: float
    description: str | None = None


class Category(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    color: str | None = None
    icon: str | None = None
    type: Literal["income", "expense"] = "expense"


class TransactionDraft(BaseModel):
    """Payload for the ledger's own transaction-creation API."""

    type: Literal["income", "expense"]
    amount: float
    description: str
    date: str
    account_id: str
    category_id: str = ""
