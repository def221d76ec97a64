from __future__ import annotations

import logging

from .csv_dialect import parse_csv
from .models import FileType, ImportResult, failed_result
from .ofx import parse_ofx

logger = logging.getLogger(__name__)

OFX_MARKERS = ("<OFX>", "OFXHEADER")
CSV_EXTENSIONS = (".csv", ".txt")

# Brazilian banks usually declare CHARSET:1252 in the OFX header
FALLBACK_ENCODING = "cp1252"


def _has_ofx_marker(content: str) -> bool:
    return any(m in content for m in OFX_MARKERS)


def sniff_delimiter(content: str) -> str:
    first_line = content.split("\n", 1)[0]
    return ";" if ";" in first_line else ","


def detect_format(file_name: str, content: str) -> FileType:
    name = (file_name or "").lower()

    if name.endswith(".ofx") or _has_ofx_marker(content):
        return "OFX"
    if name.endswith(CSV_EXTENSIONS):
        return "CSV"
    return "OFX" if _has_ofx_marker(content) else "CSV"


def parse_statement(
    file_name: str,
    content: str,
    delimiter: str | None = None,
    default_delimiter: str = ";",
) -> ImportResult:
    """
    Pick the dialect parser for a statement file and run it.

    CSV delimiter: explicit override, else sniffed from the header line for
    .csv/.txt files, else default_delimiter.
    """
    try:
        file_type = detect_format(file_name, content)

        if file_type == "OFX":
            result = parse_ofx(content)
        else:
            if delimiter is None:
                name = (file_name or "").lower()
                delimiter = sniff_delimiter(content) if name.endswith(CSV_EXTENSIONS) else default_delimiter
            result = parse_csv(content, delimiter)

        logger.debug(
            "Statement %s detected as %s: success=%s transactions=%d errors=%d",
            file_name,
            file_type,
            result.success,
            len(result.transactions),
            len(result.errors),
        )
        return result.model_copy(update={"file_name": file_name})
    except Exception as e:
        logger.warning("Statement %s could not be processed: %s", file_name, e)
        return failed_result(f"Erro ao processar arquivo: {e}").model_copy(update={"file_name": file_name})


def decode_statement_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode(FALLBACK_ENCODING, errors="replace")


def parse_statement_bytes(
    file_name: str,
    data: bytes,
    delimiter: str | None = None,
    default_delimiter: str = ";",
) -> ImportResult:
    try:
        content = decode_statement_bytes(data)
    except Exception as e:
        return failed_result(f"Erro ao processar arquivo: {e}").model_copy(update={"file_name": file_name})
    return parse_statement(file_name, content, delimiter=delimiter, default_delimiter=default_delimiter)
