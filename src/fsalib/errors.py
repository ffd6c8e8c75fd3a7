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
Exceptions raised by the automaton builders, the evaluators and the
differential harness.

Every error is detected at the point of misuse, before anything is changed, so
a builder call that raises leaves its automaton exactly as it was.
"""


# Base class


class AutomatonError(Exception):
    """
    Base class for every error raised by fsalib.

    Attributes:
        message -- explanation of the error
    """

    def __init__(self, message):
        self.message = message
        super().__init__(message)


# Builder errors


class InvalidArgumentError(AutomatonError, ValueError):
    """
    Raised when a required argument is missing: a state name or input string
    that is ``None`` or empty, or a symbol that is not a single character.

    Attributes:
        message -- explanation of the error
        argument -- the name of the offending parameter
    """

    def __init__(self, message, argument=None):
        self.argument = argument
        super().__init__(message)


class DuplicateNameError(AutomatonError):
    """
    Raised when a state name is registered twice in the same automaton.

    Attributes:
        message -- explanation of the error
        name -- the name that is already in use
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"The state name ({name}) is already used.")


class UnknownStateError(AutomatonError):
    """
    Raised when a transition or the initial state designation refers to a
    state name that was never registered.

    Attributes:
        message -- explanation of the error
        name -- the unknown state name
        role -- what the name was used as ("source", "destination", "initial")
    """

    def __init__(self, name, role="source"):
        self.name = name
        self.role = role
        super().__init__(
            f"The {role} state name ({name}) indicates a non-existent state."
        )


class DuplicateTransitionError(AutomatonError):
    """
    Raised when an identical transition is added twice.

    For a DFA the transition is identified by its source and symbol; for an
    NFA by its source, symbol and destination. Lambda transitions have a
    ``symbol`` of ``None``.

    Attributes:
        message -- explanation of the error
        src -- source state name
        symbol -- the symbol, or None for a lambda transition
        dest -- destination state name, or None when not part of the identity
    """

    def __init__(self, src, symbol=None, dest=None):
        self.src = src
        self.symbol = symbol
        self.dest = dest
        if symbol is None:
            message = (
                f"A lambda transition for the given source state ({src}) and "
                f"destination state ({dest}) already exists."
            )
        elif dest is None:
            message = (
                f"A transition for the given source state ({src}) and symbol "
                f"({symbol}) already exists."
            )
        else:
            message = (
                f"A transition for the given source state ({src}), symbol "
                f"({symbol}) and destination state ({dest}) already exists."
            )
        super().__init__(message)


class SelfLoopError(AutomatonError):
    """
    Raised when a lambda transition would lead from a state to itself.

    Attributes:
        message -- explanation of the error
        name -- the state name
    """

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"The source and destination states are equal ({name})."
        )


class FrozenAutomatonError(AutomatonError):
    """
    Raised when a builder method is called on an automaton after
    :meth:`freeze` was called on it.

    Usage:
    ------
    Automata handed out by :mod:`fsalib.samples` are frozen, so they can be
    shared freely. To extend one, build a new automaton instead::

        try:
            dfa.add_state("Extra")
        except FrozenAutomatonError:
            print("The automaton can no longer be modified.")
    """

    pass


# Evaluation errors


class NotConfiguredError(AutomatonError):
    """
    Raised when a string is analyzed before the initial state has been set.

    Attributes:
        message -- explanation of the error
    """

    def __init__(self, message="The initial state has not been set."):
        super().__init__(message)


class InconsistencyError(AutomatonError):
    """
    Raised by the differential harness when two automata that should accept
    the same language disagree on a string.

    Attributes:
        message -- explanation of the error
        string -- the input on which the automata disagree
        results -- the pair of acceptance results, in argument order
    """

    def __init__(self, string, results):
        self.string = string
        self.results = results
        super().__init__(f"Oops: {string!r} gave {results[0]} and {results[1]}")
