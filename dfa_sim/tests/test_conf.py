from django.test import SimpleTestCase, override_settings

from dfa_sim.automaton import Automaton, build_automaton
from dfa_sim.conf import DEFAULTS, get_setting
from dfa_sim.exceptions import ActivityCounterOverflow, DFAError, InvalidAutomaton
from dfa_sim.state import State


def make_loop_dfa():
    q0, q1 = State('q0'), State('q1')
    states = {q0, q1}
    transition = {q0: {'a': q1}, q1: {'a': q0}}
    return states, transition, q0, q1


class TestSettings(SimpleTestCase):
    """Test cases for DFA_SIM settings"""

    def test_defaults(self):
        """Test get_setting falls back to DEFAULTS"""
        for name, value in DEFAULTS.items():
            self.assertEqual(get_setting(name), value)

    def test_unknown_setting(self):
        """Test unknown setting"""
        with self.assertRaises(KeyError):
            get_setting('NOT_A_SETTING')

    @override_settings(DFA_SIM={'RECORD_PATH': False})
    def test_record_path_disabled(self):
        """Test record path disabled"""
        states, transition, q0, q1 = make_loop_dfa()
        dfa = Automaton(states, {'a'}, transition, q0, {q1})

        evaluation = dfa.run('a')
        self.assertTrue(evaluation.accepted)
        self.assertEqual(evaluation.path, [])
        self.assertEqual(evaluation.activity, {q0: 1, q1: 1})

    @override_settings(DFA_SIM={'MAX_ACTIVITY_COUNT': 2})
    def test_activity_counter_overflow(self):
        """Test activity counter overflow"""
        states, transition, q0, q1 = make_loop_dfa()
        dfa = Automaton(states, {'a'}, transition, q0, {q0})

        # q0 is entered twice on 'aa' and three times on 'aaaa'
        self.assertTrue(dfa.accepts('aa'))
        with self.assertRaises(ActivityCounterOverflow):
            dfa.accepts('aaaa')
        with self.assertRaises(OverflowError):
            dfa.run('aaaa')

    @override_settings(DFA_SIM={'VALIDATE_ON_CONSTRUCTION': True})
    def test_validate_on_construction(self):
        """Test validate on construction"""
        states, transition, q0, q1 = make_loop_dfa()
        with self.assertRaisesMessage(InvalidAutomaton, 'Automaton has no start state'):
            Automaton(states, {'a'}, transition, None, {q1})

        dfa = Automaton(states, {'a'}, transition, q0, {q1})
        self.assertTrue(dfa.accepts('a'))


class TestBuildAutomaton(SimpleTestCase):
    """Test cases for the validating factory"""

    def test_build_valid(self):
        """Test build_automaton with a consistent configuration"""
        states, transition, q0, q1 = make_loop_dfa()
        dfa = build_automaton(states, {'a'}, transition, q0, {q1})
        self.assertIsInstance(dfa, Automaton)
        self.assertTrue(dfa.accepts('aaa'))
        self.assertFalse(dfa.accepts('aa'))

    def test_build_invalid(self):
        """Test build_automaton rejects inconsistent configurations"""
        states, transition, q0, q1 = make_loop_dfa()
        stray = State('stray')

        with self.assertRaises(InvalidAutomaton):
            build_automaton(states, {'a'}, transition, q0, {stray})

        # Transition symbol outside the alphabet
        with self.assertRaises(DFAError):
            build_automaton(states, {'b'}, transition, q0, {q1})
