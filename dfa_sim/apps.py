from django.apps import AppConfig


class DfaSimConfig(AppConfig):
    name = 'dfa_sim'
    verbose_name = 'DFA simulator'
