from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from typing import Optional

from wavelist.core.config import Config
from wavelist.domain.charts import (
    ChartsError,
    InvalidStorefrontError,
    StorefrontNotFoundError,
    fetch_most_played,
    validate_storefront,
)
from ..cache import ResponseCache
from ..deps import get_charts_cache, get_config
from ..schemas import ChartsResponse, ErrorResponse

router = APIRouter()


def _error(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get("/charts/{storefront}", response_model=ChartsResponse)
def get_most_played(
    storefront: str,
    config: Config = Depends(get_config),
    cache: ResponseCache = Depends(get_charts_cache),
):
    """Get Apple Music most-played songs for a storefront (e.g. "us", "gb")."""
    try:
        code = validate_storefront(storefront)
    except InvalidStorefrontError as e:
        return _error(400, str(e))

    cache_key = f"charts_{code}"
    cached = cache.get(cache_key)
    if cached is not None:
        logger.debug(f"Charts cache hit for {code}")
        return cached

    try:
        payload = fetch_most_played(
            code, limit=config.charts.limit, timeout=config.http.timeout_seconds
        )
    except StorefrontNotFoundError:
        logger.warning(f"Charts storefront not found: {storefront}")
        return _error(404, f'Storefront "{storefront}" not found')
    except ChartsError as e:
        logger.error(f"Charts API error for {code}: {e}")
        return _error(500, "Failed to fetch charts data", str(e))

    result = payload.to_dict()
    cache.set(cache_key, result)
    logger.info(f"Fetched {len(payload.tracks)} chart tracks for {code}")
    return result
