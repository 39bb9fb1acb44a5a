# app/data/seed.py
from decimal import Decimal
from types import MappingProxyType
from collections.abc import Mapping

CENTS = Decimal("0.01")

#ceny jako stringi, zeby nie przechodzic przez float
SEED_PRICES = {
    "PROD-001": "999.99",
    "PROD-002": "29.99",
    "PROD-003": "79.99",
    "PROD-004": "349.99",
    "PROD-005": "149.99",
}


def build_price_table(raw: Mapping[str, str | Decimal] = SEED_PRICES) -> Mapping[str, Decimal]:
    """
    Buduje tabele cen raz przy starcie procesu.
    Zwraca widok tylko do odczytu, wiec nikt jej potem nie zmodyfikuje.
    """
    table = {}
    for product_id, value in raw.items():
        if not product_id:
            raise ValueError("productId nie moze byc pusty")
        price = Decimal(str(value)).quantize(CENTS)
        if price < 0:
            raise ValueError(f"Ujemna cena dla {product_id}: {price}")
        table[product_id] = price
    return MappingProxyType(table)
