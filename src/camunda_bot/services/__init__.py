"""
Services package for camunda_bot.
"""

from camunda_bot.services.browser import BrowserManager
from camunda_bot.services.modeler import ModelerService

__all__ = [
    "BrowserManager",
    "ModelerService",
]
