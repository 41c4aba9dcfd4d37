"""PocketPaste - async Pastebin client with agent tool wrappers."""

from pocketpaste.integrations.pastebin import (
    InvalidOptionError,
    PasteOptions,
    PastebinClient,
    PastebinError,
    get_pastebin_client,
)

__all__ = [
    "InvalidOptionError",
    "PasteOptions",
    "PastebinClient",
    "PastebinError",
    "get_pastebin_client",
]
