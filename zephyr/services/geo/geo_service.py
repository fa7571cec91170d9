"""
Geo lookup service for the profile wizard.

Country, region and city options come from the Country State City API.
Postal codes are checked against Zippopotam; that check is advisory and
never blocks a profile save.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx

from zephyr.schemas.geo import GeoOption, PostalPlace, PostalValidation

logger = logging.getLogger(__name__)

POSTAL_NOT_VALIDATED = (
    "Kode pos tidak tervalidasi (negara belum didukung atau kode tidak ditemukan)."
)


class GeoLookupError(Exception):
    """Raised when the option lookup API fails."""


class GeoConfigurationError(GeoLookupError):
    """Raised when the option lookup API key is not configured."""


class GeoService:
    """
    Cascading country -> region -> city lookups plus postal validation.
    """

    CSC_BASE_URL = "https://api.countrystatecity.in/v1"
    ZIPPOPOTAM_BASE_URL = "https://api.zippopotam.us"

    def __init__(
        self,
        csc_api_key: Optional[str] = None,
        csc_base_url: str = CSC_BASE_URL,
        zippopotam_base_url: str = ZIPPOPOTAM_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            csc_api_key: Country State City API key (sent as X-CSCAPI-KEY)
            csc_base_url: Country State City API base URL
            zippopotam_base_url: Zippopotam base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport
        """
        self._csc_api_key = csc_api_key
        self._csc_base_url = csc_base_url.rstrip("/")
        self._zippopotam_base_url = zippopotam_base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def list_countries(self) -> List[GeoOption]:
        """All countries, sorted by name."""
        items = await self._fetch_csc("/countries")
        return self._sorted_options(items, with_code=True)

    async def list_states(self, country_code: str) -> List[GeoOption]:
        """First-level regions of a country, sorted by name."""
        items = await self._fetch_csc(f"/countries/{quote(country_code, safe='')}/states")
        return self._sorted_options(items, with_code=True)

    async def list_cities(self, country_code: str, state_code: str) -> List[GeoOption]:
        """Cities of a region, sorted by name."""
        items = await self._fetch_csc(
            f"/countries/{quote(country_code, safe='')}"
            f"/states/{quote(state_code, safe='')}/cities"
        )
        return self._sorted_options(items, with_code=False)

    async def validate_postal_code(
        self,
        country_code: Optional[str],
        postal_code: Optional[str],
    ) -> PostalValidation:
        """
        Check a postal code against Zippopotam.

        Empty input is simply not valid, without a message. Lookup failures
        come back as an invalid result carrying the reason.
        """
        country = (country_code or "").strip().lower()
        postal = (postal_code or "").strip()

        if not country or not postal:
            return PostalValidation(valid=False)

        url = f"{self._zippopotam_base_url}/{quote(country, safe='')}/{quote(postal, safe='')}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.info(f"Postal lookup failed for {country}/{postal}: {e}")
            return PostalValidation(valid=False, message=str(e) or POSTAL_NOT_VALIDATED)

        if not response.is_success:
            return PostalValidation(valid=False, message=POSTAL_NOT_VALIDATED)

        try:
            places = response.json().get("places") or []
        except ValueError:
            places = []

        return PostalValidation(
            valid=True,
            places=[
                PostalPlace(name=place.get("place name", ""), region=place.get("state"))
                for place in places
            ],
        )

    async def _fetch_csc(self, path: str) -> list:
        if not self._csc_api_key:
            raise GeoConfigurationError("Missing CSC_API_KEY")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(
                    f"{self._csc_base_url}{path}",
                    headers={"X-CSCAPI-KEY": self._csc_api_key},
                )
        except httpx.HTTPError as e:
            logger.warning(f"CSC API request to {path} failed: {e}")
            raise GeoLookupError("CSC API error") from e

        if not response.is_success:
            logger.warning(f"CSC API request to {path} returned {response.status_code}")
            raise GeoLookupError("CSC API error")

        try:
            return response.json()
        except ValueError as e:
            raise GeoLookupError("CSC API error") from e

    @staticmethod
    def _sorted_options(items: list, with_code: bool) -> List[GeoOption]:
        options = [
            GeoOption(
                id=str(item["id"]),
                name=item["name"],
                code=item.get("iso2") if with_code else None,
            )
            for item in items
        ]
        options.sort(key=lambda option: option.name.casefold())
        return options
