from __future__ import annotations

from typing import Iterable, Sequence

from ..statement.models import ImportedTransaction
from .models import ExistingTransaction

AMOUNT_TOLERANCE = 0.01


def is_duplicate(
    tx: ImportedTransaction,
    existing: Iterable[ExistingTransaction],
    tolerance: float = AMOUNT_TOLERANCE,
) -> bool:
    """
    Same date, amount within tolerance and, for OFX rows, the FITID found in
    the ledger description. Without a FITID only date + amount are compared.
    """
    for ex in existing:
        if ex.date != tx.date:
            continue
        if abs(float(ex.amount) - tx.amount) >= tolerance:
            continue
        if tx.fitid and tx.fitid not in (ex.description or ""):
            continue
        return True
    return False


def detect_duplicates(
    imported: Sequence[ImportedTransaction],
    existing: Sequence[ExistingTransaction],
    tolerance: float = AMOUNT_TOLERANCE,
) -> list[ImportedTransaction]:
    return [tx for tx in imported if not is_duplicate(tx, existing, tolerance)]
