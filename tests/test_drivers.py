import io
import random

import pytest
from fsalib import samples, versionstring
from fsalib.__main__ import main
from fsalib.drivers import fuzz, prompt
from fsalib.errors import InconsistencyError
from fsalib.util import random_string, random_strings
from loguru import logger


@pytest.fixture
def cli_logging():
    yield
    # main() installs a sink on the captured stderr
    logger.remove()
    logger.disable("fsalib")


def test_prompt():
    out = io.StringIO()
    lines = io.StringIO("1010\n101\n\n10102\n")
    assert prompt(samples.even_zeros_dfa(), lines, out) == 4
    assert out.getvalue() == "True\nFalse\nTrue\nFalse\n"


def test_prompt_nfa_windows_newlines():
    out = io.StringIO()
    assert prompt(samples.even_zeros_or_ones_nfa(), ["101010\r\n", "1000101"], out) == 2
    assert out.getvalue() == "False\nTrue\n"


def test_fuzz_equivalent():
    nfa = samples.ends_with_abb_nfa()
    dfa = samples.ends_with_abb_dfa()
    assert fuzz(nfa, dfa, 300, max_length=64, rng=random.Random(7), report_every=100) == 300


def test_fuzz_inconsistent():
    nfa = samples.even_zeros_or_ones_nfa()
    dfa = samples.even_zeros_dfa()
    with pytest.raises(InconsistencyError) as excinfo:
        fuzz(nfa, dfa, 500, max_length=8, alphabet="01", rng=random.Random(1))

    s = excinfo.value.string
    assert excinfo.value.results == (nfa.analyze(s), dfa.analyze(s))
    assert nfa.analyze(s) != dfa.analyze(s)


def test_random_string():
    rng = random.Random(3)
    for _ in range(200):
        s = random_string("xy", 10, rng)
        assert len(s) <= 10
        assert set(s) <= {"x", "y"}

    assert random_string("xy", 0, rng) == ""
    assert len(list(random_strings(5, rng=rng))) == 5

    with pytest.raises(ValueError):
        random_string("", 5)
    with pytest.raises(ValueError):
        random_string("ab", -1)


def test_cli_dump(capsys, cli_logging):
    assert main(["dump", "even-zeros"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "@ Even||"


def test_cli_prompt(capsys, monkeypatch, cli_logging):
    monkeypatch.setattr("sys.stdin", io.StringIO("1010\n101\n"))
    assert main(["prompt", "even-zeros"]) == 0
    assert capsys.readouterr().out == "True\nFalse\n"


def test_cli_fuzz(capsys, cli_logging):
    args = ["fuzz", "--count", "50", "--max-length", "32", "--seed", "3"]
    assert main(args) == 0

    args = ["--log-level", "critical", "fuzz", "--nfa", "even-zeros-or-ones"]
    args += ["--dfa", "even-zeros", "--alphabet", "01", "--seed", "1"]
    args += ["--count", "500", "--max-length", "8"]
    assert main(args) == 1
    assert "error: Oops" in capsys.readouterr().err


def test_cli_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert capsys.readouterr().out.strip() == versionstring()


def test_cli_log_level(capsys, cli_logging):
    assert main(["--log-level", "debug", "dump", "even-zeros"]) == 0
    capsys.readouterr()

    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "loud", "dump", "even-zeros"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
