"""
Cloudflare Turnstile verification.

Forwards a widget token to the siteverify endpoint and reduces the answer
to a boolean.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class TurnstileService:
    """Server-side check of Turnstile challenge tokens."""

    VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

    def __init__(
        self,
        secret_key: str,
        verify_url: str = VERIFY_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            secret_key: Turnstile secret key
            verify_url: siteverify endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport
        """
        self._secret_key = secret_key
        self._verify_url = verify_url
        self._timeout = timeout
        self._transport = transport

    async def verify(self, token: str, remote_ip: Optional[str] = None) -> bool:
        """
        Verify a challenge token.

        Args:
            token: Token produced by the Turnstile widget
            remote_ip: Visitor IP, passed along when known

        Returns:
            The upstream verdict

        Raises:
            httpx.HTTPError: If the verification service cannot be reached
            ValueError: If the verification service answers with something other than a JSON object
        """
        form = {"secret": self._secret_key, "response": token}
        if remote_ip:
            form["remoteip"] = remote_ip

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(self._verify_url, data=form)

        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected siteverify response: {payload!r}")

        success = bool(payload.get("success"))

        if not success:
            logger.info(f"Turnstile rejected token: {payload.get('error-codes', [])}")

        return success
