__version__ = "0.1.0"

from .analytics.categories import suggest_category
from .ledger.dedup import detect_duplicates
from .statement import ImportedTransaction, ImportResult, parse_csv, parse_ofx, parse_statement

__all__ = [
    "__version__",
    "ImportedTransaction",
    "ImportResult",
    "parse_ofx",
    "parse_csv",
    "parse_statement",
    "detect_duplicates",
    "suggest_category",
]
