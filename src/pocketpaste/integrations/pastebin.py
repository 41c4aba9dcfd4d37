# Pastebin Client — authenticated paste creation + raw paste retrieval.
# Created: 2026-10-12
#
# Talks to the form-encoded Pastebin API:
#   POST api/api_login.php  -> user key (session token)
#   POST api_post.php       -> URL of the created paste
#   GET  raw/{paste_id}     -> raw paste text

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any

import httpx

from pocketpaste import lifecycle
from pocketpaste.config import Settings

logger = logging.getLogger(__name__)

PRIVACY_OPTIONS: tuple[str, ...] = ("public", "unlisted", "private")

EXPIRATION_OPTIONS: dict[str, str] = {
    "never": "N",
    "10 minutes": "10M",
    "1 hour": "1H",
    "1 day": "1D",
    "1 week": "1W",
    "2 weeks": "2W",
    "1 month": "1M",
    "6 months": "6M",
    "1 year": "1Y",
}

DEFAULT_PASTE_NAME = "untitled paste"
DEFAULT_PRIVACY = "1"
DEFAULT_EXPIRATION = "10M"

_REQUEST_TIMEOUT = 5.0


class PastebinError(Exception):
    """Base error for the Pastebin client."""


class InvalidOptionError(PastebinError, ValueError):
    """A paste option did not resolve against the known values."""

    def __init__(self, option: str, value: Any):
        self.option = option
        self.value = value
        super().__init__(f"Pastebin: Invalid {option} option: {value!r}")


@dataclass
class PasteOptions:
    """Options for a new paste. Unset fields fall back to the defaults."""

    name: str | None = None
    privacy: str | int | None = None
    expiration: str | None = None
    format: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PasteOptions:
        """Build options from a plain dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class PastebinClient:
    """Async client for the Pastebin API.

    Logs in lazily on the first ``post`` and reuses the returned user key
    for every later paste. ``get`` needs no authentication.

    Intended to be shared process-wide, see ``get_pastebin_client()``.
    """

    def __init__(
        self,
        settings_provider: Callable[[], Settings] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        # Secrets are re-read on every login, so the default provider
        # builds a fresh Settings from the environment each call.
        self._settings_provider = settings_provider or Settings
        self._transport = transport
        self._auth_data: str | None = None
        self._authentication_pending = False

    @property
    def session_token(self) -> str | None:
        return self._auth_data

    @property
    def authentication_pending(self) -> bool:
        return self._authentication_pending

    def _client(self, settings: Settings, **kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=settings.pastebin_base_url,
            transport=self._transport,
            **kwargs,
        )

    async def login(self) -> None:
        """Log in and keep the returned user key.

        Returns immediately when a key is already held or another login is
        in flight. A non-200 response or a transport error clears any
        previously held key.
        """
        if self._auth_data or self._authentication_pending:
            return

        self._authentication_pending = True
        try:
            settings = self._settings_provider()
            if not settings.has_credentials:
                logger.warning("No Pastebin credentials configured, login will likely fail")
            async with self._client(settings) as client:
                resp = await client.post(
                    "api/api_login.php",
                    data={
                        "api_dev_key": settings.pastebin_api_key or "",
                        "api_user_name": settings.pastebin_user_name or "",
                        "api_user_password": settings.pastebin_password or "",
                    },
                    timeout=_REQUEST_TIMEOUT,
                )
        except httpx.HTTPError as e:
            logger.warning("Pastebin login failed: %s", e)
            self._auth_data = None
            return
        finally:
            self._authentication_pending = False

        if resp.status_code != 200:
            logger.warning("Pastebin login failed (HTTP %s)", resp.status_code)
            self._auth_data = None
        else:
            logger.info("Logged in to Pastebin")
            self._auth_data = resp.text

    async def get(self, paste_id: str) -> str | None:
        """Fetch the raw content of a paste.

        Returns:
            The paste text, or None on a non-200 answer or transport error.
        """
        settings = self._settings_provider()
        try:
            async with self._client(settings) as client:
                resp = await client.get(f"raw/{paste_id}")
        except httpx.HTTPError as e:
            logger.debug("Paste %s not available: %s", paste_id, e)
            return None

        if resp.status_code != 200:
            logger.debug("Paste %s not available (HTTP %s)", paste_id, resp.status_code)
            return None
        return resp.text

    async def post(
        self,
        text: str,
        options: PasteOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Create a paste and return the response body (the paste URL).

        Args:
            text: Paste content.
            options: Name, privacy, expiration and syntax format.

        Raises:
            InvalidOptionError: privacy or expiration is not recognised.
                Raised before any request is made.
        """
        if options is None:
            options = PasteOptions()
        elif not isinstance(options, PasteOptions):
            options = PasteOptions.from_mapping(options)

        privacy = (
            self.get_privacy(options.privacy)
            if options.privacy is not None and options.privacy != ""
            else DEFAULT_PRIVACY
        )
        expiration = (
            self.get_expiration(options.expiration) if options.expiration else DEFAULT_EXPIRATION
        )

        if not self._auth_data:
            await self.login()

        settings = self._settings_provider()
        params = {
            "api_dev_key": settings.pastebin_api_key or "",
            "api_option": "paste",
            "api_paste_code": text,
            "api_paste_name": options.name or DEFAULT_PASTE_NAME,
            "api_paste_private": privacy,
            "api_paste_expire_date": expiration,
        }
        if self._auth_data:
            params["api_user_key"] = self._auth_data
        if options.format:
            params["api_paste_format"] = options.format

        async with self._client(settings) as client:
            resp = await client.post("api_post.php", data=params, timeout=_REQUEST_TIMEOUT)

        if resp.status_code != 200:
            logger.warning("Pastebin post returned HTTP %s: %s", resp.status_code, resp.text[:200])
        return resp.text

    async def delete(self, paste_id: str) -> None:
        raise NotImplementedError("Pastebin paste deletion is not implemented yet")

    @staticmethod
    def get_privacy(mode: str | int) -> str:
        """Resolve a privacy name or numeric code (0-2) to its code string."""
        if isinstance(mode, int) and not isinstance(mode, bool) and 0 <= mode <= 2:
            return str(mode)
        if isinstance(mode, str) and mode in PRIVACY_OPTIONS:
            return str(PRIVACY_OPTIONS.index(mode))
        raise InvalidOptionError("privacy", mode)

    @staticmethod
    def get_expiration(code: str) -> str:
        """Resolve an expiration name or short-code to the short-code."""
        if code in EXPIRATION_OPTIONS.values():
            return code
        if isinstance(code, str) and code in EXPIRATION_OPTIONS:
            return EXPIRATION_OPTIONS[code]
        raise InvalidOptionError("expiration", code)


_client: PastebinClient | None = None


def get_pastebin_client() -> PastebinClient:
    """Get the shared client, creating it on first use."""
    global _client
    if _client is None:
        _client = PastebinClient()
        lifecycle.register("pastebin_client", reset=reset_pastebin_client)
    return _client


def reset_pastebin_client() -> None:
    """Drop the shared client (and its session token)."""
    global _client
    _client = None
