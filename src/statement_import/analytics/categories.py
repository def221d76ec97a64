from __future__ import annotations

import unicodedata
from typing import Sequence

from ..ledger.models import Category

# Semantic bucket -> keywords typical of Brazilian statement text (merchants,
# payment rails). Declaration order is match priority.
CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "alimentação": ["mercado", "supermercado", "restaurante", "lanchonete", "padaria", "açougue", "ifood", "uber eats", "rappi"],
    "transporte": ["uber", "99", "cabify", "combustível", "gasolina", "estacionamento", "pedágio", "metro", "ônibus"],
    "saúde": ["farmácia", "drogaria", "hospital", "clínica", "médico", "dentista", "laborat"],
    "moradia": ["aluguel", "condomínio", "iptu", "luz", "energia", "água", "gás", "internet"],
    "lazer": ["cinema", "teatro", "show", "netflix", "spotify", "amazon prime", "disney"],
    "educação": ["escola", "faculdade", "curso", "livro", "udemy", "mensalidade"],
    "vestuário": ["roupa", "sapato", "tênis", "loja", "shopping"],
    "salário": ["salário", "pagamento", "vencimento", "transferência recebida"],
    "transferência": ["pix", "ted", "doc", "transferência"],
}


def fold_text(s: str | None) -> str:
    """Lowercase and strip accents: statements often print FARMACIA for farmácia."""
    t = unicodedata.normalize("NFKD", s or "")
    t = "".join(ch for ch in t if not unicodedata.combining(ch))
    return t.casefold().strip()


def _names_overlap(bucket: str, category_name: str) -> bool:
    return bucket in category_name or category_name in bucket


def find_category_for_bucket(bucket: str, categories: Sequence[Category]) -> Category | None:
    b = fold_text(bucket)
    for c in categories:
        name = fold_text(c.name)
        if name and _names_overlap(b, name):
            return c
    return None


def suggest_category(
    description: str,
    categories: Sequence[Category],
    keyword_map: dict[str, list[str]] = CATEGORY_KEYWORDS,
) -> Category | None:
    desc = fold_text(description)
    if not desc:
        return None

    for bucket, keywords in keyword_map.items():
        for keyword in keywords:
            if fold_text(keyword) not in desc:
                continue
            category = find_category_for_bucket(bucket, categories)
            if category is not None:
                return category

    return None
