import sys
from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    'VALIDATE_ON_CONSTRUCTION': False,
    'MAX_ACTIVITY_COUNT': sys.maxsize,
    'RECORD_PATH': True,
}


def get_setting(name: str) -> Any:
    """
    Look up a simulator setting from the ``DFA_SIM`` dict in Django settings.

    Settings are read on every call so ``override_settings`` is honoured.
    Outside a configured Django project the defaults are returned.
    """
    if name not in DEFAULTS:
        raise KeyError(f'Unknown DFA_SIM setting: {name}')

    if not settings.configured:
        return DEFAULTS[name]

    user_settings = getattr(settings, 'DFA_SIM', None) or {}
    return user_settings.get(name, DEFAULTS[name])
