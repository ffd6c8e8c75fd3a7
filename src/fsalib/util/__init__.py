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



import random
import time

# Alphabet of the strings generated by the differential harness
BINARY = "ab"


now = time.perf_counter


def random_string(alphabet=BINARY, max_length=1024, rng=random):
    """
    Generates a random string over ``alphabet``.

    The length is drawn uniformly from ``0`` to ``max_length`` inclusive, so
    the empty string is a possible result.

    Parameters:
    - alphabet (str or sequence): The symbols to draw from. Default is "ab".
    - max_length (int): The longest string to generate. Default is 1024.
    - rng: A ``random.Random`` instance, or the ``random`` module itself.

    Returns:
    - str: The randomly generated string.

    Example:
    >>> len(random_string("01", 8)) <= 8
    True
    """
    if not alphabet:
        raise ValueError("Called random_string with an empty alphabet")
    if max_length < 0:
        raise ValueError("max_length must not be negative")

    length = rng.randint(0, max_length)
    return "".join(rng.choice(alphabet) for _ in range(length))


def random_strings(count, alphabet=BINARY, max_length=1024, rng=random):
    """
    Yields ``count`` strings generated by :func:`random_string`.
    """
    for _ in range(count):
        yield random_string(alphabet, max_length, rng)
