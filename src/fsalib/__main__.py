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
Command line front-end::

    python -m fsalib prompt even-zeros
    python -m fsalib fuzz --count 100000 --seed 42
    python -m fsalib dump ends-with-abb
"""

import argparse
import random
import sys
from typing import List, Optional

from loguru import logger

from fsalib import samples, versionstring
from fsalib.drivers import fuzz, prompt
from fsalib.errors import AutomatonError


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fsalib", description="Finite automata evaluation drivers"
    )
    p.add_argument("--version", action="version", version=versionstring())
    p.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Minimum level of log messages written to stderr (default: INFO)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    names = sorted(samples.SAMPLES)

    pp = sub.add_parser("prompt", help="Analyze strings read from stdin")
    pp.add_argument("automaton", choices=names)

    dp = sub.add_parser("dump", help="Print the states and transitions")
    dp.add_argument("automaton", choices=names)

    fp = sub.add_parser(
        "fuzz", help="Check an NFA against an equivalent DFA on random strings"
    )
    fp.add_argument("--nfa", choices=names, default="ends-with-abb")
    fp.add_argument("--dfa", choices=names, default="ends-with-abb-dfa")
    fp.add_argument("--count", type=int, default=100000)
    fp.add_argument("--max-length", type=int, default=1024)
    fp.add_argument("--alphabet", default="ab")
    fp.add_argument("--seed", type=int, default=None)
    fp.add_argument("--report-every", type=int, default=1000)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)
    logger.enable("fsalib")

    try:
        if args.command == "prompt":
            prompt(samples.SAMPLES[args.automaton]())
        elif args.command == "dump":
            samples.SAMPLES[args.automaton]().dump(sys.stdout)
        else:
            fuzz(
                samples.SAMPLES[args.nfa](),
                samples.SAMPLES[args.dfa](),
                args.count,
                max_length=args.max_length,
                alphabet=args.alphabet,
                rng=random.Random(args.seed),
                report_every=args.report_every,
            )
    except AutomatonError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
