import django
from django.conf import settings


def pytest_configure():
    if settings.configured:
        return

    settings.configure(
        INSTALLED_APPS=['dfa_sim'],
        DATABASES={},
        DFA_SIM={},
        LOGGING={
            'version': 1,
            'disable_existing_loggers': False,
            'handlers': {
                'console': {'class': 'logging.StreamHandler'},
            },
            'loggers': {
                'dfa_sim': {'handlers': ['console'], 'level': 'WARNING'},
            },
        },
    )
    django.setup()
