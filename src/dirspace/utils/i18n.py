from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a centralized singleton manager for the CLI's user-facing strings.
Implements dot-notation lookup over nested JSON locale files with optional
variable interpolation. Engine and API messages are contract strings and
live in 'dirspace.domain.constants' instead.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_path: Optional[str] = None):
        """
        Initialize the manager and attempt to load the requested locale.

        Args:
            locale: ISO locale identifier (e.g., 'en').
            locales_path: Directory holding '<locale>.json' files; defaults to
                          the package's bundled locales.
        """
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        if locales_path is None:
            base_dir = os.path.dirname(os.path.abspath(__file__))
            locales_path = os.path.join(base_dir, LOCALES_REL_PATH)
        self._locales_path = os.path.abspath(locales_path)

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a specific translation dictionary from the filesystem.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'cli.status.bye').
            default: Text used when the key cannot be resolved.
            **kwargs: Variables for str.format interpolation.

        Returns:
            str: The formatted string, the default, or the key itself.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                current_val = None
                break
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            current_val = default if default is not None else key

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
