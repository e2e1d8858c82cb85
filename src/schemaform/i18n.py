"""Locale loading using gettext catalogues."""

import gettext as gettext_module
import logging
from pathlib import Path

from .locale import DEFAULT_LOCALE, Locale

logger = logging.getLogger(__name__)

DOMAIN = "schemaform"
LOCALE_DIR = Path(__file__).parent / "locales"


def load_locale(language: str | None = None) -> Locale:
    """Build a locale table for ``language``.

    Every message of the English default table is used as a gettext msgid;
    messages without a translation keep their English text.

    Args:
        language: Language code (e.g., "zh", "en", "zh_CN")

    Returns:
        Locale with translated templates
    """
    if not language or language == "en":
        return DEFAULT_LOCALE

    translation = _load_translation(language)
    data = {
        group: {name: translation.gettext(text) for name, text in messages.items()}
        for group, messages in DEFAULT_LOCALE.model_dump().items()
    }
    return Locale.model_validate(data)


def _load_translation(language: str | None = None) -> gettext_module.NullTranslations:
    """Load gettext translation object with fallback.

    Args:
        language: Language code
                 If None, returns NullTranslations (fallback to msgid)

    Returns:
        Translation object with fallback enabled
    """
    if not language:
        logger.debug(
            "No language specified, using NullTranslations (fallback to English)"
        )
        return gettext_module.NullTranslations()

    try:
        translation = gettext_module.translation(
            domain=DOMAIN,
            localedir=str(LOCALE_DIR),
            languages=[language],
            fallback=True,
        )
        logger.info(f"Loaded translation for language: {language}")
        return translation
    except Exception as e:
        logger.warning(
            f"Failed to load translation for {language}: {e}, using fallback"
        )
        return gettext_module.NullTranslations()
