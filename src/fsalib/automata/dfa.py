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
    StateRegistry,
    check_name,
    check_string,
    check_symbol,
)
from fsalib.errors import DuplicateTransitionError, NotConfiguredError


class DFAState:
    """
    A state of a :class:`DFA`.

    Attributes:
        name (str): The state name, unique within the owning automaton.
        accepting (bool): Whether the automaton accepts a string that ends in
            this state.
        transitions (dict): Maps each symbol to the *name* of the single
            destination state.
    """

    __slots__ = ("name", "accepting", "transitions")

    def __init__(self, name, accepting=False):
        self.name = name
        self.accepting = accepting
        self.transitions = {}

    def __repr__(self):
        return "<%s %r%s>" % (
            type(self).__name__,
            self.name,
            " accepting" if self.accepting else "",
        )

    def add_transition(self, symbol, dest):
        self.transitions[symbol] = dest

    def get_transition(self, symbol):
        """
        Returns the name of the state reached by reading ``symbol``, or None if
        the transition is undefined.
        """
        return self.transitions.get(symbol)


class DFA:
    """
    Deterministic finite automaton.

    Each state has at most one outgoing transition per symbol. The transition
    function is partial: reading a symbol with no transition halts the
    automaton and the string is rejected.

    Example: strings of zeros and ones with an even number of zeros.

        >>> dfa = DFA()
        >>> dfa.add_state("Even", True)
        >>> dfa.add_state("Odd", False)
        >>> dfa.add_transition("Even", "0", "Odd")
        >>> dfa.add_transition("Even", "1", "Even")
        >>> dfa.add_transition("Odd", "0", "Even")
        >>> dfa.add_transition("Odd", "1", "Odd")
        >>> dfa.set_initial_state("Even")
        >>> dfa.analyze("1010")
        True
        >>> dfa.analyze("10102")
        False

    Attributes:
        states (StateRegistry): The states of the automaton, keyed by name.
        initial_state (str): The name of the initial state, or None until
            :meth:`set_initial_state` is called.
    """

    def __init__(self):
        self.states = StateRegistry(DFAState)
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
        Adds a transition: reading ``symbol`` in state ``src`` moves the
        automaton to state ``dest``.

        An existing transition is never overwritten, so the transition function
        stays single-valued.

        Args:
            src (str): The source state name.
            symbol (str): A single character.
            dest (str): The destination state name.

        Raises:
            InvalidArgumentError: If a state name is None or empty, or the
                symbol is not a single character.
            UnknownStateError: If either state name is not registered.
            DuplicateTransitionError: If ``src`` already has a transition for
                ``symbol``.
            FrozenAutomatonError: If the automaton is frozen.
        """
        self.states.check_writable()
        check_name(src, "source state name")
        check_name(dest, "destination state name")
        check_symbol(symbol)
        source = self.states.resolve(src, "source")
        self.states.resolve(dest, "destination")
        if source.get_transition(symbol) is not None:
            raise DuplicateTransitionError(src, symbol)

        source.add_transition(symbol, dest)
        self.__dict__.pop("alphabet", None)
        logger.trace("Added transition {!r} -{}-> {!r}", src, symbol, dest)

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
        :class:`~fsalib.errors.FrozenAutomatonError` afterwards, which makes
        the automaton safe to share between threads.

        Returns:
            DFA: This automaton, so construction can end with
            ``return dfa.freeze()``.
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
        The set of symbols that appear in at least one transition.
        """
        labels = set()
        for state in self.states:
            labels.update(state.transitions)
        return frozenset(labels)

    def triples(self):
        """
        Yields a ``(source, symbol, destination)`` tuple for every transition.
        """
        for state in self.states:
            for symbol, dest in state.transitions.items():
                yield state.name, symbol, dest

    def start(self):
        """
        Returns the name of the initial state.

        Raises:
            NotConfiguredError: If the initial state has not been set.
        """
        if self.initial_state is None:
            raise NotConfiguredError()
        return self.initial_state

    def next_state(self, name, symbol):
        """
        Returns the name of the state reached from state ``name`` by reading
        ``symbol``, or None if the transition is undefined (the halting
        configuration).
        """
        return self.states.resolve(name).get_transition(symbol)

    def is_final(self, name):
        return self.states.resolve(name).accepting

    def dump(self, stream=None):
        """
        Prints a textual representation of the DFA to the specified stream.
        The initial state is marked with ``@`` and accepting destinations with
        ``||``.

        Example:
            @ Even||
               0 -> Odd
               1 -> Even||
              Odd
               0 -> Even||
               1 -> Odd
        """
        stream = sys.stdout if stream is None else stream
        for src in sorted(self.states.names()):
            state = self.states[src]
            beg = "@" if src == self.initial_state else " "
            end = "||" if state.accepting else ""
            print(beg, src + end, file=stream)
            for symbol in sorted(state.transitions):
                dest = state.transitions[symbol]
                end = "||" if self.states[dest].accepting else ""
                print("  ", symbol, "->", dest + end, file=stream)

    # Evaluation

    def analyze(self, string):
        """
        Returns True if the automaton accepts ``string``.

        The automaton starts in the initial state and follows one transition
        per symbol. If a symbol has no transition from the current state the
        string is rejected at once, without reading the remaining symbols.
        Otherwise the string is accepted if and only if the state reached at
        the end of input is accepting.

        Args:
            string (str): The input. Each character is one symbol.

        Raises:
            InvalidArgumentError: If ``string`` is None.
            NotConfiguredError: If the initial state has not been set.
        """
        check_string(string)
        name = self.start()
        states = self.states
        for symbol in string:
            name = states[name].get_transition(symbol)
            if name is None:
                # Halting configuration
                return False
        return states[name].accepting
