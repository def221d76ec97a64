from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .analytics.categories import fold_text, suggest_category
from .ledger.dedup import detect_duplicates
from .ledger.models import Category, ExistingTransaction, TransactionDraft
from .statement.models import ImportedTransaction, ImportResult

FALLBACK_CATEGORY_NAMES = ("outros", "other", "geral")


@dataclass(frozen=True)
class ImportReview:
    result: ImportResult
    transactions: list[ImportedTransaction]
    duplicates_skipped: int
    suggestions: dict[int, str] = field(default_factory=dict)  # index -> category id

    @property
    def errors(self) -> list[str]:
        return list(self.result.errors)


def prepare_review(
    result: ImportResult,
    existing: Sequence[ExistingTransaction],
    categories: Sequence[Category],
) -> ImportReview:
    if not result.success:
        return ImportReview(result=result, transactions=[], duplicates_skipped=0)

    unique = detect_duplicates(result.transactions, existing)

    suggestions: dict[int, str] = {}
    for i, tx in enumerate(unique):
        suggested = suggest_category(tx.description, categories)
        if suggested is not None:
            suggestions[i] = suggested.id

    return ImportReview(
        result=result,
        transactions=unique,
        duplicates_skipped=len(result.transactions) - len(unique),
        suggestions=suggestions,
    )


def find_fallback_category(categories: Sequence[Category]) -> Category | None:
    for c in categories:
        if fold_text(c.name) in FALLBACK_CATEGORY_NAMES:
            return c
    return None


def build_drafts(
    review: ImportReview,
    account_id: str,
    selected: Iterable[int] | None = None,
    overrides: dict[int, str] | None = None,
    fallback: Category | None = None,
) -> list[TransactionDraft]:
    if not (account_id or "").strip():
        raise ValueError("account_id is required")

    indices = sorted(set(range(len(review.transactions)) if selected is None else selected))
    overrides = overrides or {}

    drafts: list[TransactionDraft] = []
    for i in indices:
        if not 0 <= i < len(review.transactions):
            raise ValueError(f"transaction index out of range: {i}")

        tx = review.transactions[i]
        category_id = overrides.get(i) or review.suggestions.get(i) or (fallback.id if fallback else "")

        drafts.append(
            TransactionDraft(
                type=tx.type,
                amount=tx.amount,
                description=tx.description,
                date=tx.date,
                account_id=account_id,
                category_id=category_id,
            )
        )
    return drafts
