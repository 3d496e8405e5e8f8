from typing import Dict, Set
from collections import deque


def validate_automaton(automaton) -> Dict:
    """
    Validates that the automaton is internally consistent.

    Checks that:
    1. A start state exists and is one of the states
    2. Every accept state is one of the states
    3. Every transition starts and ends in a state and reads an alphabet symbol

    Args:
        automaton: The Automaton to validate

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    states = automaton.states()
    alphabet = automaton.alphabet()
    start = automaton.initial_state()

    if start is None:
        return {'valid': False, 'error': 'Automaton has no start state'}

    if start not in states:
        return {'valid': False, 'error': f"Start state '{start}' not in states"}

    for state in automaton.accept_states():
        if state not in states:
            return {'valid': False, 'error': f"Accepting state '{state}' not in states"}

    for source, row in automaton.transition_function().items():
        if source not in states:
            return {'valid': False, 'error': f"Transition from unknown state '{source}'"}

        for symbol, destination in row.items():
            if symbol not in alphabet:
                return {'valid': False, 'error': f"Transition on symbol '{symbol}' not in alphabet"}
            if destination not in states:
                return {
                    'valid': False,
                    'error': f"Transition from '{source}' on '{symbol}' leads to unknown state '{destination}'"
                }

    return {'valid': True}


def is_complete(automaton) -> bool:
    """
    Checks if the automaton is complete.

    An automaton is complete if for each state and each symbol there is a
    transition, so the implicit trap state can never be entered.

    Args:
        automaton: The Automaton to check

    Returns:
        bool: True if the automaton is complete, False otherwise
    """
    for state in automaton.states():
        for symbol in automaton.alphabet():
            if automaton.next_state(state, symbol) is None:
                return False

    return True


def reachable_states(automaton) -> Set:
    """
    Collects every state reachable from the start state, the start included.

    Returns an empty set when there is no start state.
    """
    start = automaton.initial_state()
    if start is None:
        return set()

    transitions = automaton.transition_function()
    reachable = {start}
    queue = deque([start])

    while queue:
        current_state = queue.popleft()

        for next_state in transitions.get(current_state, {}).values():
            if next_state not in reachable:
                reachable.add(next_state)
                queue.append(next_state)

    return reachable


def is_connected(automaton) -> bool:
    """
    Checks if the automaton is connected.

    An automaton is connected if all states are reachable from the start state.
    """
    states = automaton.states()

    # Trivially connected if no states
    if not states:
        return True

    if automaton.initial_state() is None:
        return len(states) <= 1

    reachable = reachable_states(automaton)
    return all(state in reachable for state in states)


def check_all_properties(automaton) -> Dict:
    """
    Check all automaton properties at once.

    Returns:
        Dict: {'valid': bool, 'complete': bool, 'connected': bool}
    """
    return {
        'valid': validate_automaton(automaton)['valid'],
        'complete': is_complete(automaton),
        'connected': is_connected(automaton)
    }
