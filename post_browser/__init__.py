"""
Top-level package for the post browser.

This package exposes the core architecture (view state, services, UI adapters).
Most code should import from submodules such as:
    post_browser.core
    post_browser.services
    post_browser.ui
"""

__all__: list[str] = []
