from pocketpaste.tools.builtin.pastebin import PastebinGetTool, PastebinPostTool

__all__ = ["PastebinGetTool", "PastebinPostTool"]
