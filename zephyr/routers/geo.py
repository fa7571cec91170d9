"""
FastAPI router for the profile wizard's geo lookups.

Public endpoints: the wizard needs them before the profile exists.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from common.utils import success_response
from common.utils.exceptions import BadGatewayException, ConfigurationException
from zephyr.dependencies import get_geo_service
from zephyr.services.geo import GeoService, GeoLookupError, GeoConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/geo", tags=["geo"])

Code = Annotated[str, Path(pattern=r"^[A-Za-z0-9-]{1,10}$")]


async def _lookup(coroutine):
    try:
        options = await coroutine
    except GeoConfigurationError as e:
        raise ConfigurationException(str(e))
    except GeoLookupError as e:
        raise BadGatewayException(str(e), code="GEO_LOOKUP_FAILED")
    return success_response([option.model_dump() for option in options])


@router.get("/countries")
async def list_countries(
    geo_service: Annotated[GeoService, Depends(get_geo_service)],
):
    """All countries, sorted by name."""
    return await _lookup(geo_service.list_countries())


@router.get("/countries/{country_code}/states")
async def list_states(
    geo_service: Annotated[GeoService, Depends(get_geo_service)],
    country_code: Code,
):
    """Regions of a country, sorted by name."""
    return await _lookup(geo_service.list_states(country_code))


@router.get("/countries/{country_code}/states/{state_code}/cities")
async def list_cities(
    geo_service: Annotated[GeoService, Depends(get_geo_service)],
    country_code: Code,
    state_code: Code,
):
    """Cities of a region, sorted by name."""
    return await _lookup(geo_service.list_cities(country_code, state_code))


@router.get("/postal-codes/{country_code}/{postal_code}")
async def validate_postal_code(
    geo_service: Annotated[GeoService, Depends(get_geo_service)],
    country_code: Code,
    postal_code: Annotated[str, Path(max_length=20)],
):
    """Advisory postal code check."""
    result = await geo_service.validate_postal_code(country_code, postal_code)
    return success_response(result.model_dump())
