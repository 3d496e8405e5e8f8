from .exceptions import ActivityCounterOverflow, DFAError, InvalidAutomaton
from .state import State
from .automaton import TRAP, Automaton, Evaluation, Goto, Trap, build_automaton

__all__ = [
    'ActivityCounterOverflow',
    'Automaton',
    'DFAError',
    'Evaluation',
    'Goto',
    'InvalidAutomaton',
    'State',
    'TRAP',
    'Trap',
    'build_automaton',
]
