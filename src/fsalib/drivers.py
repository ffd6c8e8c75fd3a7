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
Drivers that exercise an automaton from the outside: an interactive prompt
and a differential fuzz harness that checks two automata against each other.
"""

import random
import sys

from loguru import logger

from fsalib.errors import InconsistencyError
from fsalib.util import BINARY, now, random_string


def prompt(automaton, lines=None, out=None):
    """
    Reads strings one per line and prints whether ``automaton`` accepts each
    of them, until the input is exhausted.

    Args:
        automaton: A :class:`~fsalib.automata.DFA` or
            :class:`~fsalib.automata.NFA`.
        lines (iterable): The input lines. Defaults to ``sys.stdin``.
        out (file): Where to print the results. Defaults to ``sys.stdout``.

    Returns:
        int: The number of strings analyzed.
    """
    lines = sys.stdin if lines is None else lines
    out = sys.stdout if out is None else out

    count = 0
    for line in lines:
        string = line.rstrip("\r\n")
        print(automaton.analyze(string), file=out)
        count += 1
    return count


def fuzz(
    first,
    second,
    count,
    max_length=1024,
    alphabet=BINARY,
    rng=None,
    report_every=1000,
):
    """
    Checks that two automata accept the same language by analyzing ``count``
    random strings with both.

    Args:
        first: An automaton, usually an NFA.
        second: An automaton that should accept the same language, usually a
            DFA.
        count (int): How many strings to check.
        max_length (int): The longest string to generate.
        alphabet (str): The symbols the strings are made of.
        rng: A ``random.Random`` instance. A new unseeded one is used if
            None.
        report_every (int): Log progress after this many strings. Zero or
            None turns progress messages off.

    Returns:
        int: The number of strings checked, which is ``count``.

    Raises:
        InconsistencyError: On the first string the automata disagree on.
    """
    rng = random.Random() if rng is None else rng
    t = now()
    for i in range(1, count + 1):
        string = random_string(alphabet, max_length, rng)
        results = (first.analyze(string), second.analyze(string))
        if results[0] != results[1]:
            logger.error("Automata disagree on {!r}: {}", string, results)
            raise InconsistencyError(string, results)

        if report_every and i % report_every == 0:
            logger.info("{} strings analyzed!", i)

    logger.debug("Checked {} strings in {:0.3f}s", count, now() - t)
    return count
