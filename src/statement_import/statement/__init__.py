from .csv_dialect import parse_csv
from .detect import detect_format, parse_statement, parse_statement_bytes, sniff_delimiter
from .models import ImportedTransaction, ImportResult
from .ofx import parse_ofx

__all__ = [
    "ImportedTransaction",
    "ImportResult",
    "parse_ofx",
    "parse_csv",
    "detect_format",
    "sniff_delimiter",
    "parse_statement",
    "parse_statement_bytes",
]
