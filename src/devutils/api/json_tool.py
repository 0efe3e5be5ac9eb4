"""FastAPI JSON formatter endpoints.

POST /v1/json/prettify  - re-indent JSON with 2 spaces
POST /v1/json/minify    - strip insignificant whitespace

Malformed JSON is not an HTTP error: the response carries ``error`` and an
empty ``output``.
"""

from fastapi import APIRouter, Depends

from devutils.api.dependencies import get_json_formatter
from devutils.models.conversion import ConversionInput, FormatResult
from devutils.tools.json_formatter import JsonFormatter

router = APIRouter(prefix="/v1/json", tags=["json"])


@router.post("/prettify", response_model=FormatResult)
async def prettify_json(
    body: ConversionInput,
    formatter: JsonFormatter = Depends(get_json_formatter),
) -> FormatResult:
    return formatter.prettify(body.input_text)


@router.post("/minify", response_model=FormatResult)
async def minify_json(
    body: ConversionInput,
    formatter: JsonFormatter = Depends(get_json_formatter),
) -> FormatResult:
    return formatter.minify(body.input_text)
