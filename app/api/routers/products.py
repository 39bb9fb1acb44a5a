# app/api/routers/products.py
from functools import lru_cache

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.responses import DecimalJSONResponse
from app.domain.schemas import ProductPriceOut
from app.services.price_service import PriceService

router = APIRouter(prefix="/api/products", tags=["products"])


#jedna instancja na proces, tabela cen budowana raz
@lru_cache
def get_price_service() -> PriceService:
    return PriceService()


@router.get("/test", response_class=PlainTextResponse)
def test(svc: PriceService = Depends(get_price_service)):
    return svc.test()


@router.get(
    "/{product_id}/price",
    response_model=ProductPriceOut,
    response_class=DecimalJSONResponse,
)
def get_price(product_id: str, svc: PriceService = Depends(get_price_service)):
    # model_dump w trybie python zostawia Decimal, response renderuje go jako liczbe
    result = svc.get_price(product_id)
    return DecimalJSONResponse(result.model_dump(by_alias=True))
