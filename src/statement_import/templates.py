from __future__ import annotations

from typing import Iterable

from .ledger.models import TransactionDraft
from .pipeline import ImportReview
from .statement.models import ImportedTransaction, ImportResult


def section(title: str, lines: Iterable[str]) -> str:
    body = "\n".join(line for line in lines if line)
    return f"{title}\n{body}".strip()


def info(message: str) -> str:
    return f"ℹ️ {message}"


def success(message: str) -> str:
    return f"✅ {message}"


def warning(message: str) -> str:
    return f"⚠️ {message}"


def error(message: str) -> str:
    return f"❌ {message}"


def divider() -> str:
    return "──────────────────"


def bullets(items: Iterable[str], *, prefix: str = "• ") -> str:
    xs = [x for x in items if x]
    return "\n".join(prefix + x for x in xs)


def money(tx: ImportedTransaction) -> str:
    sign = "+" if tx.type == "income" else "-"
    return f"{sign}{tx.amount:.2f}"


def tx_line(tx: ImportedTransaction, category_id: str | None = None) -> str:
    desc = tx.description.replace("\n", " ").strip()
    if len(desc) > 60:
        desc = desc[:57] + "..."
    line = f"{tx.date}  {money(tx):>12}  {desc}"
    if category_id:
        line += f"  [{category_id}]"
    return line


def _failed(result: ImportResult) -> str:
    return "\n".join([error("Não foi possível processar o arquivo"), bullets(result.errors)]).strip()


def _summary(result: ImportResult) -> list[str]:
    header: list[str] = [
        f"Arquivo: {result.file_name or '-'} ({result.file_type})",
        f"Banco: {result.bank_name}" if result.bank_name else "",
        f"Conta: {result.account_number}" if result.account_number else "",
        f"Período: {result.start_date} a {result.end_date}",
        f"Transações: {len(result.transactions)}",
    ]
    parts = [success("Extrato processado"), section("Resumo", header)]
    if result.errors:
        parts.append(section(warning(f"{len(result.errors)} aviso(s)"), [bullets(result.errors)]))
    return parts


def render_result(result: ImportResult) -> str:
    if not result.success:
        return _failed(result)

    parts = _summary(result)
    parts.append(divider())
    parts.append(bullets(tx_line(t) for t in result.transactions))
    return "\n\n".join(p for p in parts if p).strip()


def render_review(review: ImportReview) -> str:
    if not review.result.success:
        return _failed(review.result)

    parts = _summary(review.result)
    parts.append(divider())

    if review.duplicates_skipped:
        parts.append(warning(f"{review.duplicates_skipped} transação(ões) já existem e foram ignoradas."))

    suggested = len(review.suggestions)
    parts.append(
        section(
            "Revisão",
            [
                f"Novas: {len(review.transactions)}",
                f"Com categoria sugerida: {suggested}",
                f"Sem categoria: {len(review.transactions) - suggested}",
            ],
        )
    )
    parts.append(bullets(tx_line(t, review.suggestions.get(i)) for i, t in enumerate(review.transactions)))
    return "\n\n".join(p for p in parts if p).strip()


def render_drafts(drafts: list[TransactionDraft]) -> str:
    lines = [
        f"{d.date}  {d.type:<7}  {d.amount:>10.2f}  {d.description}  -> {d.category_id or 'sem categoria'}"
        for d in drafts
    ]
    return section(info(f"{len(drafts)} transação(ões) prontas para importar"), [bullets(lines)])
