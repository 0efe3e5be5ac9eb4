"""FastAPI time converter endpoints.

POST /v1/time/convert  - timestamp or date string to four renderings
GET  /v1/time/presets  - current moment as ready-made inputs
"""

from fastapi import APIRouter, Depends

from devutils.api.dependencies import get_time_converter
from devutils.models.conversion import ConversionInput, TimePresets, TimeResult
from devutils.tools.time_converter import TimeConverter

router = APIRouter(prefix="/v1/time", tags=["time"])


@router.post("/convert", response_model=TimeResult)
async def convert_time(
    body: ConversionInput,
    converter: TimeConverter = Depends(get_time_converter),
) -> TimeResult:
    return converter.convert(body.input_text)


@router.get("/presets", response_model=TimePresets)
async def get_presets(
    converter: TimeConverter = Depends(get_time_converter),
) -> TimePresets:
    return converter.presets()
