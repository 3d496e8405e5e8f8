import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, List, Mapping, Optional, Sequence, Set, Tuple, Union

from .conf import get_setting
from .dfa_properties import validate_automaton
from .exceptions import ActivityCounterOverflow, InvalidAutomaton
from .state import State

logger = logging.getLogger(__name__)

TransitionTable = Mapping[State, Mapping[str, State]]


@dataclass(frozen=True)
class Goto:
    """A defined transition to ``state``."""
    state: State


@dataclass(frozen=True)
class Trap:
    """The implicit trap state: no transition is defined."""


TRAP = Trap()

Transition = Union[Goto, Trap]


@dataclass
class Evaluation:
    """
    Result of evaluating one input string.

    ``activity`` maps every state entered during this run to the number of
    times it was entered. ``rejection_reason`` and ``rejection_position`` are
    None for accepted input.
    """
    accepted: bool
    path: List[Tuple[State, str, State]] = field(default_factory=list)
    activity: Counter = field(default_factory=Counter)
    rejection_reason: Optional[str] = None
    rejection_position: Optional[int] = None

    def activity_of(self, state: State) -> int:
        return self.activity[state]

    def as_dict(self) -> Dict:
        return {
            'accepted': self.accepted,
            'path': [(str(src), symbol, str(dst)) for src, symbol, dst in self.path],
            'rejection_reason': self.rejection_reason,
            'rejection_position': self.rejection_position,
        }


class Automaton:
    """
    Deterministic finite automaton.

    A trap state is implicit: any (state, symbol) pair missing from the
    transition table leads to it, and the input is rejected on the spot.
    The transition table is a mapping of rows, ``{state: {symbol: state}}``.

    The constructor stores its arguments as given. Inconsistent
    configurations are reported by ``accepts``/``run`` only as far as the start
    and accept states go; use ``build_automaton`` for full eager validation.
    """

    def __init__(
        self,
        states: Set[State],
        alphabet: Set[str],
        transition: TransitionTable,
        start: Optional[State],
        accept: Set[State],
    ):
        self._states = states
        self._alphabet = alphabet
        self._transition = transition
        self._start = start
        self._accept = accept
        self._lock = threading.Lock()
        self.last_evaluation: Optional[Evaluation] = None

        if get_setting('VALIDATE_ON_CONSTRUCTION'):
            _raise_if_invalid(self)

    def states(self) -> Set[State]:
        return self._states

    def alphabet(self) -> Set[str]:
        return self._alphabet

    def accept_states(self) -> Set[State]:
        return self._accept

    def transition_function(self) -> TransitionTable:
        return self._transition

    def initial_state(self) -> Optional[State]:
        return self._start

    def transition(self, source: State, symbol: Hashable) -> Transition:
        """
        Look up the transition for ``source`` on ``symbol``.

        A source with no row in the table and a symbol missing from the
        source's row both yield ``TRAP``.
        """
        row = self._transition.get(source)
        if row is None:
            return TRAP
        destination = row.get(symbol)
        if destination is None:
            return TRAP
        return Goto(destination)

    def next_state(self, source: State, symbol: Hashable) -> Optional[State]:
        """Destination state, or None for the implicit trap state."""
        step = self.transition(source, symbol)
        if isinstance(step, Goto):
            return step.state
        return None

    def accepts(self, input_string: Optional[Sequence[str]] = None) -> bool:
        """
        Decide whether ``input_string`` is in the language of this DFA.

        Every state's activity counter is reset to zero, then incremented each
        time the state is entered. ``""`` and ``None`` both denote the empty
        string, which is always accepted. Calls on the same instance are
        serialized because they share the counters.
        """
        with self._lock:
            for state in self._states:
                state.reset()
            evaluation = self.run(input_string, on_enter=State.increment)
            self.last_evaluation = evaluation
        return evaluation.accepted

    def run(
        self,
        input_string: Optional[Sequence[str]] = None,
        on_enter: Optional[Callable[[State], None]] = None,
    ) -> Evaluation:
        """
        Evaluate ``input_string`` with private activity counts.

        Shared State objects are left untouched unless ``on_enter`` does so;
        it is called once each time a state is entered.

        Raises:
            InvalidAutomaton: non-empty input and no usable start state.
            ActivityCounterOverflow: a state is entered more than
                MAX_ACTIVITY_COUNT times.
        """
        if not input_string:
            logger.debug('Empty input accepted')
            return Evaluation(accepted=True)

        self._check_runnable()

        record_path = get_setting('RECORD_PATH')
        limit = get_setting('MAX_ACTIVITY_COUNT')
        evaluation = Evaluation(accepted=False)

        def enter(state: State) -> None:
            count = evaluation.activity[state]
            if count >= limit:
                raise ActivityCounterOverflow(
                    f"Activity counter of state '{state}' exceeds {limit}")
            evaluation.activity[state] += 1
            if on_enter is not None:
                on_enter(state)

        current = self._start
        enter(current)
        consumed = 0

        for position, symbol in enumerate(input_string):
            step = self.transition(current, symbol)

            if isinstance(step, Trap):
                if symbol not in self._alphabet:
                    reason = f"Symbol '{symbol}' not in alphabet"
                else:
                    reason = f"No transition defined for symbol '{symbol}' from state '{current}'"
                evaluation.rejection_reason = reason
                evaluation.rejection_position = position
                logger.debug('Rejected at position %d: %s', position, reason)
                return evaluation

            if record_path:
                evaluation.path.append((current, symbol, step.state))
            current = step.state
            enter(current)
            consumed += 1

        if current in self._accept:
            evaluation.accepted = True
            logger.debug("Accepted in state '%s'", current)
        else:
            evaluation.rejection_reason = f"Final state '{current}' is not an accepting state"
            evaluation.rejection_position = consumed
            logger.debug(evaluation.rejection_reason)

        return evaluation

    def _check_runnable(self) -> None:
        if self._start is None:
            logger.warning('Evaluation attempted on automaton without a start state')
            raise InvalidAutomaton('Automaton has no start state')
        if self._start not in self._states:
            logger.warning("Start state '%s' is not in the state set", self._start)
            raise InvalidAutomaton(f"Start state '{self._start}' not in states")
        for state in self._accept:
            if state not in self._states:
                logger.warning("Accept state '%s' is not in the state set", state)
                raise InvalidAutomaton(f"Accepting state '{state}' not in states")

    def __repr__(self):
        return (f'<Automaton states={len(self._states)} '
                f'alphabet={sorted(map(str, self._alphabet))} start={self._start}>')


def _raise_if_invalid(automaton: Automaton) -> None:
    validation = validate_automaton(automaton)
    if not validation['valid']:
        logger.warning('Invalid automaton: %s', validation['error'])
        raise InvalidAutomaton(validation['error'])


def build_automaton(
    states: Set[State],
    alphabet: Set[str],
    transition: TransitionTable,
    start: Optional[State],
    accept: Set[State],
) -> Automaton:
    """Construct an Automaton, raising InvalidAutomaton if it is inconsistent."""
    automaton = Automaton(states, alphabet, transition, start, accept)
    _raise_if_invalid(automaton)
    return automaton
