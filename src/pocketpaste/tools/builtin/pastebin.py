# Pastebin tools — create pastes and read raw pastes.
# Created: 2026-10-12

import logging

from pocketpaste.tools.protocol import BaseTool

logger = logging.getLogger(__name__)


class PastebinPostTool(BaseTool):
    """Upload text to Pastebin and return the paste URL."""

    name = "pastebin_post"
    description = (
        "Upload text to Pastebin and get back a shareable link. Useful for long "
        "logs, code or output that is too big to send inline."
    )
    parameters = {
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "Content of the paste",
            },
            "name": {
                "type": "string",
                "description": "Paste title (default: 'untitled paste')",
            },
            "privacy": {
                "type": "string",
                "enum": ["public", "unlisted", "private"],
                "description": "Visibility (default: unlisted)",
            },
            "expiration": {
                "type": "string",
                "description": (
                    "When the paste expires: never, 10 minutes, 1 hour, 1 day, 1 week, "
                    "2 weeks, 1 month, 6 months, 1 year (default: 10 minutes)"
                ),
            },
            "format": {
                "type": "string",
                "description": "Syntax highlighting language, e.g. 'python' or 'json'",
            },
        },
        "required": ["text"],
    }

    async def execute(
        self,
        text: str,
        name: str | None = None,
        privacy: str | None = None,
        expiration: str | None = None,
        format: str | None = None,
    ) -> str:
        try:
            from pocketpaste.integrations.pastebin import PasteOptions, get_pastebin_client

            client = get_pastebin_client()
            url = await client.post(
                text,
                PasteOptions(name=name, privacy=privacy, expiration=expiration, format=format),
            )
            url = url.strip()
            if not url.startswith("http"):
                return self._error(f"Pastebin rejected the paste: {url}")
            return f"Paste created: {url}"

        except Exception as e:
            return self._error(f"Pastebin upload failed: {e}")


class PastebinGetTool(BaseTool):
    """Read the raw content of a paste."""

    name = "pastebin_get"
    description = "Read the raw text of a Pastebin paste by its ID (the part after pastebin.com/)."
    parameters = {
        "type": "object",
        "properties": {
            "paste_id": {
                "type": "string",
                "description": "Paste ID, e.g. 'abc123XY'",
            },
        },
        "required": ["paste_id"],
    }

    async def execute(self, paste_id: str) -> str:
        paste_id = paste_id.strip().rstrip("/").rsplit("/", 1)[-1]
        if not paste_id:
            return self._error("paste_id is required")

        try:
            from pocketpaste.integrations.pastebin import get_pastebin_client

            content = await get_pastebin_client().get(paste_id)
            if content is None:
                return f"Paste '{paste_id}' not found."
            return content

        except Exception as e:
            return self._error(f"Pastebin read failed: {e}")
