# app/api/responses.py
from typing import Any

import simplejson
from fastapi.responses import JSONResponse


class DecimalJSONResponse(JSONResponse):
    """JSONResponse, ktory wypisuje Decimal jako liczbe bez przejscia przez float (0.00 zostaje 0.00)."""

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8")
