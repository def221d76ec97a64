from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TxType = Literal["income", "expense"]
FileType = Literal["OFX", "CSV"]

PLACEHOLDER_DESCRIPTION = "Transação importada"


class ImportedTransaction(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str  # YYYY-MM-DD
    amount: float = Field(ge=0)
    type: TxType
    description: str = PLACEHOLDER_DESCRIPTION

    # OFX only
    memo: str | None = None
    check_num: str | None = Field(default=None, alias="checkNum")
    fitid: str | None = None

    # CSV only
    original_line: str | None = Field(default=None, alias="originalLine")


class ImportResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    transactions: tuple[ImportedTransaction, ...] = ()
    errors: tuple[str, ...] = ()

    file_name: str | None = Field(default=None, alias="fileName")
    file_type: FileType | None = Field(default=None, alias="fileType")
    bank_name: str | None = Field(default=None, alias="bankName")
    account_number: str | None = Field(default=None, alias="accountNumber")
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")


def failed_result(message: str, file_type: FileType | None = None) -> ImportResult:
    return ImportResult(success=False, transactions=(), errors=(message,), file_type=file_type)
