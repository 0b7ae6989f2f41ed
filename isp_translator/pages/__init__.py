"""Static HTML pages (root / demo page)."""

from isp_translator.pages.root import render_root_page

__all__ = ["render_root_page"]
