from __future__ import annotations

import logging
import re

from .models import PLACEHOLDER_DESCRIPTION, ImportedTransaction, ImportResult, failed_result
from .values import ofx_date_to_iso, parse_ofx_amount, tx_type_for

logger = logging.getLogger(__name__)

# OFX 1.x is SGML: leaf tags are usually left unclosed, so a value runs until
# the next tag or the end of the line.
_STMTTRN_RE = re.compile(r"<STMTTRN>(.*?)</STMTTRN>", re.IGNORECASE | re.DOTALL)


def _tag_re(tag: str) -> re.Pattern[str]:
    return re.compile(rf"<{tag}>([^<\r\n]+)", re.IGNORECASE)


_TAGS = {
    name: _tag_re(name)
    for name in ("BANKID", "ACCTID", "TRNTYPE", "DTPOSTED", "TRNAMT", "FITID", "MEMO", "NAME", "CHECKNUM")
}


def _tag(block: str, name: str) -> str | None:
    m = _TAGS[name].search(block)
    if not m:
        return None
    value = m.group(1).strip()
    return value or None


def _parse_block(block: str, position: int, errors: list[str]) -> ImportedTransaction | None:
    raw_date = _tag(block, "DTPOSTED")
    raw_amount = _tag(block, "TRNAMT")
    fitid = _tag(block, "FITID")
    label = f"Transação {position}" + (f" (FITID {fitid})" if fitid else "")

    if raw_date is None or raw_amount is None:
        errors.append(f"{label} ignorada: data ou valor ausente")
        return None

    date = ofx_date_to_iso(raw_date)
    if date is None:
        errors.append(f"{label} ignorada: data inválida {raw_date!r}")
        return None

    try:
        amount = parse_ofx_amount(raw_amount)
    except ValueError:
        errors.append(f"{label} ignorada: valor inválido {raw_amount!r}")
        return None

    name = _tag(block, "NAME")
    memo = _tag(block, "MEMO")

    return ImportedTransaction(
        date=date,
        amount=abs(amount),
        type=tx_type_for(amount),
        description=name or memo or PLACEHOLDER_DESCRIPTION,
        memo=memo,
        fitid=fitid,
        check_num=_tag(block, "CHECKNUM"),
    )


def parse_ofx(content: str) -> ImportResult:
    transactions: list[ImportedTransaction] = []
    errors: list[str] = []

    try:
        for position, m in enumerate(_STMTTRN_RE.finditer(content), start=1):
            try:
                tx = _parse_block(m.group(1), position, errors)
            except Exception as e:
                errors.append(f"Erro ao processar transação {position}: {e}")
                continue
            if tx is not None:
                transactions.append(tx)

        transactions.sort(key=lambda t: t.date)

        logger.debug("OFX parsed: %d transactions, %d errors", len(transactions), len(errors))

        return ImportResult(
            success=len(transactions) > 0,
            transactions=transactions,
            errors=errors,
            file_type="OFX",
            bank_name=_tag(content, "BANKID"),
            account_number=_tag(content, "ACCTID"),
            start_date=transactions[0].date if transactions else None,
            end_date=transactions[-1].date if transactions else None,
        )
    except Exception as e:
        logger.warning("OFX parse failed: %s", e)
        return failed_result(f"Erro ao processar arquivo OFX: {e}", file_type="OFX")
