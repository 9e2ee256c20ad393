"""
Top-level package for the public art browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    art_browser.core
    art_browser.views
    art_browser.ui
"""

__all__: list[str] = []
