from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .models import PLACEHOLDER_DESCRIPTION, ImportedTransaction, ImportResult, failed_result
from .values import csv_date_to_iso, parse_br_amount, tx_type_for

logger = logging.getLogger(__name__)

# Header fragments per column role. First matching column wins.
COLUMN_KEYWORDS: dict[str, tuple[str, ...]] = {
    "date": ("data", "date"),
    "amount": ("valor", "amount", "quantia"),
    "description": ("descri", "memo", "hist", "observ"),
}

# Header names that only match as the whole column name
COLUMN_EXACT_NAMES: dict[str, tuple[str, ...]] = {
    "date": ("dt",),
}


@dataclass(frozen=True)
class CsvColumns:
    date: int | None
    amount: int | None
    description: int | None


def _is_quoted(s: str) -> bool:
    t = s.strip()
    return len(t) >= 2 and t[0] == '"' and t[-1] == '"'


def _unquote(s: str) -> str:
    return s.strip()[1:-1].replace('""', '"')


def _split(line: str, delimiter: str) -> list[str]:
    """
    Split on the delimiter. A cell fully wrapped in quotes may contain the
    delimiter; an unbalanced quote is kept as plain text.
    """
    pieces = line.split(delimiter)
    fields: list[str] = []
    i = 0
    while i < len(pieces):
        piece = pieces[i]
        if piece.lstrip().startswith('"'):
            for j in range(i, len(pieces)):
                joined = delimiter.join(pieces[i : j + 1])
                if _is_quoted(joined):
                    fields.append(_unquote(joined))
                    i = j + 1
                    break
            else:
                fields.append(piece)
                i += 1
            continue
        fields.append(piece)
        i += 1
    return fields


def _find_column(columns: list[str], keywords: tuple[str, ...], exact: tuple[str, ...] = ()) -> int | None:
    for i, name in enumerate(columns):
        if name in exact or any(k in name for k in keywords):
            return i
    return None


def detect_columns(
    header: str,
    delimiter: str = ";",
    keywords: dict[str, tuple[str, ...]] = COLUMN_KEYWORDS,
    exact_names: dict[str, tuple[str, ...]] = COLUMN_EXACT_NAMES,
) -> CsvColumns:
    columns = [c.strip() for c in _split(header.lstrip("\ufeff").lower(), delimiter)]
    return CsvColumns(
        date=_find_column(columns, keywords["date"], exact_names.get("date", ())),
        amount=_find_column(columns, keywords["amount"], exact_names.get("amount", ())),
        description=_find_column(columns, keywords["description"], exact_names.get("description", ())),
    )


def _cell(parts: list[str], index: int, role: str) -> str:
    if index >= len(parts):
        raise IndexError(f"coluna de {role} ausente")
    return parts[index].strip()


def parse_csv(content: str, delimiter: str = ";") -> ImportResult:
    transactions: list[ImportedTransaction] = []
    errors: list[str] = []

    try:
        # only "\n" ends a record; a trailing "\r" goes with the per-line strip
        lines = content.strip().split("\n")

        if len(lines) < 2:
            return failed_result("Arquivo CSV vazio ou inválido", file_type="CSV")

        cols = detect_columns(lines[0], delimiter)
        logger.debug("CSV columns detected: %s (delimiter=%r)", cols, delimiter)

        if cols.date is None or cols.amount is None:
            return failed_result("Não foi possível identificar as colunas de data e valor", file_type="CSV")

        for i in range(1, len(lines)):
            line = lines[i].strip()
            if not line:
                continue

            try:
                parts = _split(line, delimiter)
                raw_date = _cell(parts, cols.date, "data")
                raw_amount = _cell(parts, cols.amount, "valor")

                description = ""
                if cols.description is not None and cols.description < len(parts):
                    description = parts[cols.description].strip()

                if not raw_date or not raw_amount:
                    continue

                amount = parse_br_amount(raw_amount)
                # footer/summary lines
                if math.isnan(amount):
                    continue

                date = csv_date_to_iso(raw_date)
                if date is None:
                    errors.append(f"Linha {i + 1}: data inválida {raw_date!r}")
                    continue

                transactions.append(
                    ImportedTransaction(
                        date=date,
                        amount=abs(amount),
                        type=tx_type_for(amount),
                        description=description or PLACEHOLDER_DESCRIPTION,
                        original_line=line,
                    )
                )
            except Exception as e:
                errors.append(f"Linha {i + 1}: {e}")

        logger.debug("CSV parsed: %d transactions, %d errors", len(transactions), len(errors))

        return ImportResult(
            success=len(transactions) > 0,
            transactions=transactions,
            errors=errors,
            file_type="CSV",
            start_date=transactions[0].date if transactions else None,
            end_date=transactions[-1].date if transactions else None,
        )
    except Exception as e:
        logger.warning("CSV parse failed: %s", e)
        return failed_result(f"Erro ao processar arquivo CSV: {e}", file_type="CSV")
