# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.


import sys

from cached_property import cached_property
from loguru import logger

from fsalib.automata.base import (
    EPSILON,
    StateRegistry,
    check_name,
    check_string,
    check_symbol,
)
from fsalib.errors import DuplicateTransitionError, NotConfiguredError, SelfLoopError

_EMPTY = frozenset()


def epsilon_closure(names, successors):
    """
    Returns the epsilon-closure of a set of states: the states themselves plus
    every state reachable from them by following zero or more lambda
    transitions.

    The traversal uses an explicit work-list and never revisits a state that
    is already in the closure, so it terminates on cyclic lambda graphs and
    does not depend on recursion depth. The result is a frozenset and does
    not depend on the order in which states or edges are visited.

    Args:
        names (iterable): The state names to close.
        successors (callable): Called with a state name, returns an iterable
            of the names reachable from it by one lambda transition.

    Returns:
        frozenset: The closed set of state names.

    Example:
        >>> graph = {"a": {"b"}, "b": {"c", "a"}}
        >>> sorted(epsilon_closure({"a"}, lambda n: graph.get(n, ())))
        ['a', 'b', 'c']
    """
    closure = set(names)
    stack = list(closure)
    while stack:
        name = stack.pop()
        for nxt in successors(name):
            if nxt not in closure:
                closure.add(nxt)
                stack.append(nxt)
    return frozenset(closure)


class NFAState:
    """
    A state of an :class:`NFA`.

    Attributes:
        name (str): The state name, unique within the owning automaton.
        accepting (bool): Whether a frontier containing this state at the end
            of input makes the automaton accept.
        transitions (dict): Maps each symbol to the set of destination state
            names.
        lambda_transitions (set): Names of the states reachable without
            consuming a symbol.
    """

    __slots__ = ("name", "accepting", "transitions", "lambda_transitions")

    def __init__(self, name, accepting=False):
        self.name = name
        self.accepting = accepting
        self.transitions = {}
        self.lambda_transitions = set()

    def __repr__(self):
        return "<%s %r%s>" % (
            type(self).__name__,
            self.name,
            " accepting" if self.accepting else "",
        )

    def add_transition(self, symbol, dest):
        self.transitions.setdefault(symbol, set()).add(dest)

    def add_lambda_transition(self, dest):
        self.lambda_transitions.add(dest)

    def get_transitions(self, symbol):
        """
        Returns the names of the states reached by reading ``symbol``. The
        result is empty when there is no such transition.
        """
        return self.transitions.get(symbol, _EMPTY)


class NFA:
    """
    Nondeterministic finite automaton with lambda (epsilon) transitions.

    A state may have any number of transitions for the same symbol, and any
    number of lambda transitions, which are followed without consuming input.
    Strings are evaluated by simulating every possible path at once: the set
    of active states (the frontier) is advanced one symbol at a time and
    closed under lambda transitions after each step.

    Example: strings of zeros and ones with an even number of zeros or an
    even number of ones.

        >>> nfa = NFA()
        >>> nfa.add_state("Initial State", False)
        >>> nfa.add_state("Even Number of Zeros", True)
        >>> nfa.add_state("Odd Number of Zeros", False)
        >>> nfa.add_state("Even Number of Ones", True)
        >>> nfa.add_state("Odd Number of Ones", False)
        >>> nfa.add_lambda_transition("Initial State", "Even Number of Zeros")
        >>> nfa.add_lambda_transition("Initial State", "Even Number of Ones")
        >>> nfa.add_transition("Even Number of Zeros", "0", "Odd Number of Zeros")
        >>> nfa.add_transition("Even Number of Zeros", "1", "Even Number of Zeros")
        >>> nfa.add_transition("Odd Number of Zeros", "0", "Even Number of Zeros")
        >>> nfa.add_transition("Odd Number of Zeros", "1", "Odd Number of Zeros")
        >>> nfa.add_transition("Even Number of Ones", "0", "Even Number of Ones")
        >>> nfa.add_transition("Even Number of Ones", "1", "Odd Number of Ones")
        >>> nfa.add_transition("Odd Number of Ones", "0", "Odd Number of Ones")
        >>> nfa.add_transition("Odd Number of Ones", "1", "Even Number of Ones")
        >>> nfa.set_initial_state("Initial State")
        >>> nfa.analyze("1000101")
        True
        >>> nfa.analyze("101010")
        False

    Attributes:
        states (StateRegistry): The states of the automaton, keyed by name.
        initial_state (str): The name of the initial state, or None until
            :meth:`set_initial_state` is called.
    """

    def __init__(self):
        self.states = StateRegistry(NFAState)
        self.initial_state = None

    def __len__(self):
        """
        Returns the number of states in the automaton.
        """
        return len(self.states)

    def __contains__(self, name):
        return name in self.states

    def __repr__(self):
        return "<%s %d states, initial=%r%s>" % (
            type(self).__name__,
            len(self.states),
            self.initial_state,
            " frozen" if self.frozen else "",
        )

    # Construction

    def add_state(self, name, accepting=False):
        """
        Adds a state.

        Args:
            name (str): The state name.
            accepting (bool): True if and only if this state is a final or
                accepting state.

        Raises:
            InvalidArgumentError: If the state name is None or empty.
            DuplicateNameError: If the state name is already used.
            FrozenAutomatonError: If the automaton is frozen.
        """
        self.states.add(name, accepting)

    def add_transition(self, src, symbol, dest):
        """
        Adds a transition: reading ``symbol`` in state ``src`` may move the
        automaton to state ``dest``.

        Several destinations may be added for the same source and symbol; they
        accumulate into a set. Only an identical triple is rejected.

        Args:
            src (str): The source state name.
            symbol (str): A single character.
            dest (str): The destination state name.

        Raises:
            InvalidArgumentError: If a state name is None or empty, or the
                symbol is not a single character.
            UnknownStateError: If either state name is not registered.
            DuplicateTransitionError: If this exact transition already exists.
            FrozenAutomatonError: If the automaton is frozen.
        """
        self.states.check_writable()
        check_name(src, "source state name")
        check_name(dest, "destination state name")
        check_symbol(symbol)
        source = self.states.resolve(src, "source")
        self.states.resolve(dest, "destination")
        if dest in source.get_transitions(symbol):
            raise DuplicateTransitionError(src, symbol, dest)

        source.add_transition(symbol, dest)
        self.__dict__.pop("alphabet", None)
        logger.trace("Added transition {!r} -{}-> {!r}", src, symbol, dest)

    def add_lambda_transition(self, src, dest):
        """
        Adds a lambda transition from ``src`` to ``dest``, which the automaton
        follows without consuming a symbol.

        Raises:
            InvalidArgumentError: If a state name is None or empty.
            UnknownStateError: If either state name is not registered.
            SelfLoopError: If ``src`` and ``dest`` are the same state.
            DuplicateTransitionError: If this lambda transition already exists.
            FrozenAutomatonError: If the automaton is frozen.
        """
        self.states.check_writable()
        check_name(src, "source state name")
        check_name(dest, "destination state name")
        source = self.states.resolve(src, "source")
        self.states.resolve(dest, "destination")
        if src == dest:
            raise SelfLoopError(src)
        if dest in source.lambda_transitions:
            raise DuplicateTransitionError(src, None, dest)

        source.add_lambda_transition(dest)
        logger.trace("Added lambda transition {!r} --> {!r}", src, dest)

    def set_initial_state(self, name):
        """
        Sets the initial state.

        Raises:
            InvalidArgumentError: If the state name is None or empty.
            UnknownStateError: If the state name is not registered.
            FrozenAutomatonError: If the automaton is frozen.
        """
        self.states.check_writable()
        self.states.resolve(name, "initial")
        self.initial_state = name

    def freeze(self):
        """
        Ends the construction phase. Every builder method raises
        :class:`~fsalib.errors.FrozenAutomatonError` afterwards.

        Returns:
            NFA: This automaton.
        """
        if not self.states.frozen:
            self.states.freeze()
            logger.debug("Froze {!r}", self)
        return self

    @property
    def frozen(self):
        return self.states.frozen

    # Inspection

    @cached_property
    def alphabet(self):
        """
        The set of symbols that appear in at least one transition. Lambda
        transitions contribute nothing.
        """
        labels = set()
        for state in self.states:
            labels.update(state.transitions)
        return frozenset(labels)

    def triples(self):
        """
        Yields a ``(source, symbol, destination)`` tuple for every transition.
        Lambda transitions are reported with the symbol ``EPSILON``.
        """
        for state in self.states:
            for symbol, dests in state.transitions.items():
                for dest in dests:
                    yield state.name, symbol, dest
            for dest in state.lambda_transitions:
                yield state.name, EPSILON, dest

    def _successors(self, name):
        return self.states[name].lambda_transitions

    def closure(self, names):
        """
        Returns the epsilon-closure of the given state names as a frozenset.
        A single string is taken as one state name.

        Raises:
            UnknownStateError: If a name is not registered.
        """
        if isinstance(names, str):
            names = {names}
        else:
            names = set(names)
        for name in names:
            self.states.resolve(name)
        return epsilon_closure(names, self._successors)

    def start(self):
        """
        Returns the initial frontier: the epsilon-closure of the initial
        state.

        Raises:
            NotConfiguredError: If the initial state has not been set.
        """
        if self.initial_state is None:
            raise NotConfiguredError()
        return epsilon_closure((self.initial_state,), self._successors)

    def _step(self, frontier, symbol):
        states = self.states
        stepped = set()
        for name in frontier:
            stepped.update(states[name].get_transitions(symbol))
        return epsilon_closure(stepped, self._successors)

    def next_state(self, frontier, symbol):
        """
        Advances a frontier by one symbol: collects the destinations of every
        state in ``frontier`` for ``symbol`` and returns the epsilon-closure
        of the result as a frozenset. The result is empty when no state of
        the frontier can read ``symbol``.

        Raises:
            UnknownStateError: If a name in ``frontier`` is not registered.
        """
        for name in frontier:
            self.states.resolve(name)
        return self._step(frontier, symbol)

    def is_final(self, frontier):
        """
        Returns True if at least one state of the frontier is accepting.

        Raises:
            UnknownStateError: If a name in ``frontier`` is not registered.
        """
        states = self.states
        return any([states.resolve(name).accepting for name in frontier])

    def dump(self, stream=None):
        """
        Prints a textual representation of the NFA to the specified stream.
        States in the initial frontier are marked with ``@``, accepting states
        with ``||`` and lambda transitions with ``--``.
        """
        stream = sys.stdout if stream is None else stream
        starts = self.start() if self.initial_state is not None else _EMPTY
        for src in sorted(self.states.names()):
            state = self.states[src]
            beg = "@" if src in starts else " "
            end = "||" if state.accepting else ""
            print(beg, src + end, file=stream)
            for symbol in sorted(state.transitions):
                dests = ", ".join(sorted(state.transitions[symbol]))
                print("  ", symbol, "->", dests, file=stream)
            for dest in sorted(state.lambda_transitions):
                print("  ", "--", "->", dest, file=stream)

    # Evaluation

    def analyze(self, string):
        """
        Returns True if the automaton accepts ``string``.

        The frontier starts as the epsilon-closure of the initial state. For
        each symbol, every state of the frontier follows its transitions for
        that symbol and the union of the destinations is closed again. The
        string is accepted if the final frontier contains an accepting state.
        Once the frontier is empty it stays empty, so the remaining input is
        not read.

        Args:
            string (str): The input. Each character is one symbol.

        Raises:
            InvalidArgumentError: If ``string`` is None.
            NotConfiguredError: If the initial state has not been set.
        """
        check_string(string)
        frontier = self.start()
        for symbol in string:
            if not frontier:
                break
            frontier = self._step(frontier, symbol)
        return self.is_final(frontier)
