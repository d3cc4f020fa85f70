"""User-facing message catalogue.

This is DATA, not code. To add a locale, add a table here.
"""

from __future__ import annotations

from typing import Dict

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "interpreter_unavailable": "Error: PHP is not installed on this system.",
        "spawn_failure": "Execution error: {reason}",
        "busy": "Error: an execution is already in progress.",
        "empty_source": "Error: there is no code to execute.",
    },
    "fr": {
        "interpreter_unavailable": "Erreur: PHP n'est pas installé sur ce système.",
        "spawn_failure": "Erreur d'exécution: {reason}",
        "busy": "Erreur: une exécution est déjà en cours.",
        "empty_source": "Erreur: aucun code à exécuter.",
    },
}


def get_message(key: str, locale: str = DEFAULT_LOCALE, **params: str) -> str:
    """Look up a message, falling back to the default locale.

    Args:
        key: Message key (e.g., "spawn_failure")
        locale: Locale code such as "en" or "fr"
        **params: Values substituted into the message template

    Raises:
        KeyError: If the key is unknown in the default locale too
    """
    table = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    template = table.get(key) or MESSAGES[DEFAULT_LOCALE][key]
    return template.format(**params) if params else template
