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


"""
Pieces shared by the deterministic and nondeterministic automata: argument
validation and the :class:`StateRegistry` arena that owns every state of one
automaton.

Transitions never hold references to other state objects. They hold state
names, which are keys into the registry of the automaton that owns both ends
of the transition.
"""

from loguru import logger

from fsalib.errors import (
    DuplicateNameError,
    FrozenAutomatonError,
    InvalidArgumentError,
    UnknownStateError,
)

# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers stand in for labels that are not symbols of the input alphabet,
    such as the label of a lambda transition when transitions are listed.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("start")
        >>> repr(marker)
        '<start>'
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


EPSILON = Marker("EPSILON")


# Argument validation


def check_name(name, argument="name"):
    """
    Raises :class:`InvalidArgumentError` unless ``name`` is a non-empty
    string.

    Args:
        name: The state name to check.
        argument (str): The parameter name, used in the error message.
    """
    if name is None:
        raise InvalidArgumentError(f"The {argument} is null.", argument)
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(
            f"The {argument} must be a non-empty string, not {name!r}.", argument
        )


def check_symbol(symbol):
    """
    Raises :class:`InvalidArgumentError` unless ``symbol`` is a string of
    exactly one character.
    """
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise InvalidArgumentError(
            f"The symbol must be a single character, not {symbol!r}.", "symbol"
        )


def check_string(string):
    """
    Raises :class:`InvalidArgumentError` if the string to analyze is missing.
    The empty string is a valid input.
    """
    if string is None:
        raise InvalidArgumentError("The given string is null.", "string")


# Arena


class StateRegistry:
    """
    Name-keyed arena holding the states of one automaton.

    The registry creates the state objects itself (using the ``factory``
    passed to the constructor), so a state can never belong to two automata.
    States are never removed. Once :meth:`freeze` has been called the registry
    refuses every further change, and so do the automata built on it (they
    call :meth:`check_writable` before mutating anything).

    Attributes:
        frozen (bool): True once :meth:`freeze` has been called.
    """

    def __init__(self, factory):
        """
        Args:
            factory (callable): Called as ``factory(name, accepting)`` to
                create a new state.
        """
        self._factory = factory
        self._states = {}
        self.frozen = False

    def __len__(self):
        return len(self._states)

    def __contains__(self, name):
        return name in self._states

    def __iter__(self):
        return iter(self._states.values())

    def __getitem__(self, name):
        return self._states[name]

    def names(self):
        """Returns an iterator over the registered state names."""
        return iter(self._states)

    def check_writable(self):
        """
        Raises :class:`FrozenAutomatonError` if the registry has been frozen.
        """
        if self.frozen:
            raise FrozenAutomatonError(
                "The automaton is frozen and can no longer be modified."
            )

    def freeze(self):
        self.frozen = True

    def add(self, name, accepting=False):
        """
        Creates and registers a new state.

        Args:
            name (str): The unique state name.
            accepting (bool): Whether the new state is accepting.

        Returns:
            The new state object.

        Raises:
            FrozenAutomatonError: If the registry is frozen.
            InvalidArgumentError: If the name is None or empty.
            DuplicateNameError: If the name is already registered.
        """
        self.check_writable()
        check_name(name, "state name")
        if name in self._states:
            raise DuplicateNameError(name)

        state = self._factory(name, bool(accepting))
        self._states[name] = state
        logger.trace("Added state {!r} (accepting={})", name, state.accepting)
        return state

    def resolve(self, name, role="source"):
        """
        Returns the state registered under ``name``.

        Args:
            name (str): The state name to look up.
            role (str): How the name is being used ("source", "destination"
                or "initial"); only used in error messages.

        Raises:
            InvalidArgumentError: If the name is None or empty.
            UnknownStateError: If no state has this name.
        """
        check_name(name, f"{role} state name")
        try:
            return self._states[name]
        except KeyError:
            raise UnknownStateError(name, role) from None
