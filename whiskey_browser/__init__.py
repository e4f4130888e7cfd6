"""
Top-level package for the whiskey collection browser.

This package exposes the core architecture (domain, config, UI adapters).
Most code should import from submodules such as:
    whiskey_browser.core
    whiskey_browser.config
    whiskey_browser.ui
"""

__all__: list[str] = []
