from decimal import Decimal
from collections.abc import Mapping

from app.data.seed import build_price_table
from app.domain.schemas import ProductPriceOut
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PRICE = Decimal("0.00")
TEST_MESSAGE = "Controller is working!"


class PriceService:
    """
    Odczyt cen produktow z tabeli w pamieci.
    Tabela jest budowana raz w konstruktorze i potem tylko czytana,
    wiec wspolbiezne requesty nie potrzebuja zadnych lockow.
    """

    def __init__(self, prices: Mapping[str, Decimal] | None = None):
        self._prices = build_price_table(prices) if prices is not None else build_price_table()
        logger.info(f"PriceService gotowy, {len(self._prices)} produktow w tabeli")

    @property
    def prices(self) -> Mapping[str, Decimal]:
        return self._prices

    #query - odczyt, nieznany produkt ma cene 0.00
    def get_price(self, product_id: str) -> ProductPriceOut:
        price = self._prices.get(product_id, DEFAULT_PRICE)
        logger.debug(f"Cena dla {product_id!r}: {price}")
        return ProductPriceOut(product_id=product_id, price=price)

    def test(self) -> str:
        return TEST_MESSAGE
