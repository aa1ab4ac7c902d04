"""
Browser services package for camunda_bot.
Contains the selenium session and page primitives.
"""

from camunda_bot.services.browser.browser import BrowserManager, button_with_text

__all__ = [
    "BrowserManager",
    "button_with_text",
]
