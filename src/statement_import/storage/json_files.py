from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..ledger.models import Category, ExistingTransaction


def _load_list(path: Path) -> list[Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list")
    return data


def load_existing_transactions(path: Path) -> list[ExistingTransaction]:
    return [ExistingTransaction.model_validate(x) for x in _load_list(path)]


def load_categories(path: Path) -> list[Category]:
    return [Category.model_validate(x) for x in _load_list(path)]
