from .json_files import load_categories, load_existing_transactions

__all__ = [
    "load_categories",
    "load_existing_transactions",
]
