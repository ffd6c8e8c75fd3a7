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
Ready-made automata. Each function builds a new, frozen automaton.
"""

from fsalib.automata import DFA, NFA


def even_zeros_dfa():
    """
    Strings of zeros and ones with an even number of zeros.
    """
    dfa = DFA()
    dfa.add_state("Even", True)
    dfa.add_state("Odd", False)

    dfa.add_transition("Even", "0", "Odd")
    dfa.add_transition("Even", "1", "Even")
    dfa.add_transition("Odd", "0", "Even")
    dfa.add_transition("Odd", "1", "Odd")

    dfa.set_initial_state("Even")
    return dfa.freeze()


def even_zeros_or_ones_nfa():
    """
    Strings of zeros and ones with an even number of zeros or an even number
    of ones. Two lambda transitions lead from a non-accepting initial state
    into two independent parity counters.
    """
    nfa = NFA()
    nfa.add_state("Initial State", False)
    nfa.add_state("Even Number of Zeros", True)
    nfa.add_state("Odd Number of Zeros", False)
    nfa.add_state("Even Number of Ones", True)
    nfa.add_state("Odd Number of Ones", False)

    nfa.add_lambda_transition("Initial State", "Even Number of Zeros")
    nfa.add_lambda_transition("Initial State", "Even Number of Ones")

    nfa.add_transition("Even Number of Zeros", "0", "Odd Number of Zeros")
    nfa.add_transition("Even Number of Zeros", "1", "Even Number of Zeros")
    nfa.add_transition("Odd Number of Zeros", "0", "Even Number of Zeros")
    nfa.add_transition("Odd Number of Zeros", "1", "Odd Number of Zeros")

    nfa.add_transition("Even Number of Ones", "0", "Even Number of Ones")
    nfa.add_transition("Even Number of Ones", "1", "Odd Number of Ones")
    nfa.add_transition("Odd Number of Ones", "0", "Odd Number of Ones")
    nfa.add_transition("Odd Number of Ones", "1", "Even Number of Ones")

    nfa.set_initial_state("Initial State")
    return nfa.freeze()


def ends_with_abb_nfa():
    """
    Thompson-style NFA for ``(a|b)*abb``, with a lambda cycle through the
    starred group.
    """
    nfa = NFA()
    for i in range(10):
        nfa.add_state(f"q{i}", False)
    nfa.add_state("q10", True)

    nfa.add_lambda_transition("q0", "q1")
    nfa.add_lambda_transition("q0", "q7")
    nfa.add_lambda_transition("q1", "q2")
    nfa.add_lambda_transition("q1", "q4")
    nfa.add_transition("q2", "a", "q3")
    nfa.add_lambda_transition("q3", "q6")
    nfa.add_transition("q4", "b", "q5")
    nfa.add_lambda_transition("q5", "q6")
    nfa.add_lambda_transition("q6", "q1")
    nfa.add_lambda_transition("q6", "q7")
    nfa.add_transition("q7", "a", "q8")
    nfa.add_transition("q8", "b", "q9")
    nfa.add_transition("q9", "b", "q10")

    nfa.set_initial_state("q0")
    return nfa.freeze()


def ends_with_abb_dfa():
    """
    DFA for ``(a|b)*abb``, accepting the same language as
    :func:`ends_with_abb_nfa`.
    """
    dfa = DFA()
    for name in "ABCD":
        dfa.add_state(name, False)
    dfa.add_state("E", True)

    dfa.add_transition("A", "a", "B")
    dfa.add_transition("A", "b", "C")
    dfa.add_transition("B", "a", "B")
    dfa.add_transition("B", "b", "D")
    dfa.add_transition("C", "a", "B")
    dfa.add_transition("C", "b", "C")
    dfa.add_transition("D", "a", "B")
    dfa.add_transition("D", "b", "E")
    dfa.add_transition("E", "a", "B")
    dfa.add_transition("E", "b", "C")

    dfa.set_initial_state("A")
    return dfa.freeze()


# Names used by the command line
SAMPLES = {
    "even-zeros": even_zeros_dfa,
    "even-zeros-or-ones": even_zeros_or_ones_nfa,
    "ends-with-abb": ends_with_abb_nfa,
    "ends-with-abb-dfa": ends_with_abb_dfa,
}
