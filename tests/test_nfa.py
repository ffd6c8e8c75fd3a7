import io
from contextlib import redirect_stdout

import pytest
from fsalib import samples
from fsalib.automata import EPSILON, NFA
from fsalib.errors import (
    DuplicateNameError,
    DuplicateTransitionError,
    FrozenAutomatonError,
    InvalidArgumentError,
    NotConfiguredError,
    SelfLoopError,
    UnknownStateError,
)


def zeros_or_ones():
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
    return nfa


def test_analyze():
    nfa = zeros_or_ones()
    nfa.set_initial_state("Initial State")
    assert nfa.analyze("")
    assert nfa.analyze("10010101")
    assert nfa.analyze("1000101")
    assert nfa.analyze("1001101")
    assert not nfa.analyze("101010")
    assert not nfa.analyze("100102101")


def test_sample_matches_builder():
    nfa = zeros_or_ones()
    nfa.set_initial_state("Initial State")
    sample = samples.even_zeros_or_ones_nfa()
    for s in ("", "0", "1", "01", "0011", "010", "1000101", "101010", "12"):
        assert nfa.analyze(s) == sample.analyze(s)


def test_empty_string_uses_closure():
    nfa = NFA()
    nfa.add_state("start", False)
    nfa.add_state("middle", False)
    nfa.add_state("end", True)
    nfa.set_initial_state("start")
    assert not nfa.analyze("")

    nfa.add_lambda_transition("start", "middle")
    assert not nfa.analyze("")

    nfa.add_lambda_transition("middle", "end")
    assert nfa.analyze("")


def test_analyze_without_initial_state():
    nfa = zeros_or_ones()
    with pytest.raises(NotConfiguredError):
        nfa.analyze("")
    with pytest.raises(NotConfiguredError):
        nfa.start()


def test_analyze_none():
    nfa = zeros_or_ones()
    nfa.set_initial_state("Initial State")
    with pytest.raises(InvalidArgumentError):
        nfa.analyze(None)


def test_add_state_errors():
    nfa = zeros_or_ones()
    with pytest.raises(InvalidArgumentError):
        nfa.add_state(None, False)
    with pytest.raises(DuplicateNameError):
        nfa.add_state("Initial State", True)
    assert not nfa.states["Initial State"].accepting


def test_add_lambda_transition_errors():
    nfa = zeros_or_ones()
    with pytest.raises(InvalidArgumentError):
        nfa.add_lambda_transition(None, "Even Number of Zeros")
    with pytest.raises(InvalidArgumentError):
        nfa.add_lambda_transition("Initial State", None)
    with pytest.raises(UnknownStateError):
        nfa.add_lambda_transition("initial state", "Even Number of Zeros")
    with pytest.raises(UnknownStateError):
        nfa.add_lambda_transition("Initial State", "even number of zeros")
    with pytest.raises(DuplicateTransitionError) as excinfo:
        nfa.add_lambda_transition("Initial State", "Even Number of Zeros")
    assert excinfo.value.symbol is None
    assert excinfo.value.dest == "Even Number of Zeros"
    with pytest.raises(SelfLoopError) as excinfo:
        nfa.add_lambda_transition("Initial State", "Initial State")
    assert excinfo.value.name == "Initial State"

    assert nfa.states["Initial State"].lambda_transitions == {
        "Even Number of Zeros",
        "Even Number of Ones",
    }


def test_add_transition_errors():
    nfa = zeros_or_ones()
    with pytest.raises(InvalidArgumentError):
        nfa.add_transition(None, "0", "Odd Number of Zeros")
    with pytest.raises(InvalidArgumentError):
        nfa.add_transition("Even Number of Zeros", "0", None)
    with pytest.raises(InvalidArgumentError):
        nfa.add_transition("Even Number of Zeros", "00", "Odd Number of Zeros")
    with pytest.raises(UnknownStateError):
        nfa.add_transition("even number of zeros", "0", "Odd Number of Zeros")
    with pytest.raises(UnknownStateError):
        nfa.add_transition("Even Number of Zeros", "0", "odd number of zeros")
    with pytest.raises(DuplicateTransitionError) as excinfo:
        nfa.add_transition("Even Number of Zeros", "0", "Odd Number of Zeros")
    assert excinfo.value.dest == "Odd Number of Zeros"


def test_multiple_destinations():
    nfa = NFA()
    nfa.add_state("A")
    nfa.add_state("B")
    nfa.add_state("C", True)
    nfa.add_transition("A", "a", "B")
    nfa.add_transition("A", "a", "C")
    nfa.set_initial_state("A")

    assert nfa.states["A"].get_transitions("a") == {"B", "C"}
    assert nfa.next_state(nfa.start(), "a") == frozenset(["B", "C"])
    assert nfa.analyze("a")
    assert not nfa.analyze("aa")

    with pytest.raises(DuplicateTransitionError):
        nfa.add_transition("A", "a", "C")
    assert nfa.states["A"].get_transitions("a") == {"B", "C"}


def test_dead_frontier_rejects():
    nfa = NFA()
    nfa.add_state("A", True)
    nfa.add_transition("A", "a", "A")
    nfa.set_initial_state("A")
    assert nfa.analyze("aaa")
    assert not nfa.analyze("aab")
    assert not nfa.analyze("baa")
    assert nfa.next_state(nfa.start(), "b") == frozenset()


def test_lambda_cycle():
    nfa = NFA()
    nfa.add_state("A")
    nfa.add_state("B")
    nfa.add_state("C", True)
    nfa.add_lambda_transition("A", "B")
    nfa.add_lambda_transition("B", "A")
    nfa.add_transition("B", "x", "A")
    nfa.add_transition("A", "y", "C")
    nfa.set_initial_state("A")

    assert nfa.start() == frozenset(["A", "B"])
    assert not nfa.analyze("")
    assert nfa.analyze("y")
    assert nfa.analyze("xxxy")
    assert not nfa.analyze("yx")


def test_ends_with_abb():
    nfa = samples.ends_with_abb_nfa()
    assert nfa.analyze("abb")
    assert nfa.analyze("aabb")
    assert nfa.analyze("babb")
    assert nfa.analyze("abbabb")
    assert not nfa.analyze("")
    assert not nfa.analyze("ab")
    assert not nfa.analyze("abba")
    assert not nfa.analyze("abbc")


def test_freeze():
    nfa = samples.even_zeros_or_ones_nfa()
    assert nfa.frozen
    with pytest.raises(FrozenAutomatonError):
        nfa.add_state("Extra")
    with pytest.raises(FrozenAutomatonError):
        nfa.add_transition("Initial State", "0", "Odd Number of Zeros")
    with pytest.raises(FrozenAutomatonError):
        nfa.add_lambda_transition("Odd Number of Zeros", "Initial State")
    with pytest.raises(FrozenAutomatonError):
        nfa.set_initial_state("Even Number of Ones")
    assert len(nfa) == 5
    assert nfa.analyze("1000101")


def test_inspection():
    nfa = zeros_or_ones()
    nfa.set_initial_state("Initial State")
    assert nfa.start() == frozenset(
        ["Initial State", "Even Number of Zeros", "Even Number of Ones"]
    )
    assert nfa.is_final(nfa.start())
    assert not nfa.is_final(["Initial State", "Odd Number of Ones"])
    assert not nfa.is_final([])
    assert nfa.alphabet == frozenset("01")

    triples = set(nfa.triples())
    assert len(triples) == 10
    assert ("Initial State", EPSILON, "Even Number of Ones") in triples
    assert ("Odd Number of Ones", "1", "Even Number of Ones") in triples

    with pytest.raises(UnknownStateError):
        nfa.next_state(["Nowhere"], "0")


def test_dump(capsys):
    nfa = NFA()
    nfa.add_state("A")
    nfa.add_state("B", True)
    nfa.add_state("C")
    nfa.add_lambda_transition("A", "B")
    nfa.add_transition("B", "x", "C")
    nfa.add_transition("B", "x", "A")
    nfa.set_initial_state("A")
    nfa.dump()
    assert capsys.readouterr().out.splitlines() == [
        "@ A",
        "   -- -> B",
        "@ B||",
        "   x -> A, C",
        "  C",
    ]


def test_dump_follows_redirected_stdout():
    nfa = zeros_or_ones()
    buf = io.StringIO()
    with redirect_stdout(buf):
        nfa.dump()
    lines = buf.getvalue().splitlines()
    assert lines[0] == "  Even Number of Ones||"
    assert "   -- -> Even Number of Ones" in lines


def test_is_final_unknown_state():
    nfa = zeros_or_ones()
    with pytest.raises(UnknownStateError):
        nfa.is_final(["Nowhere"])
    with pytest.raises(UnknownStateError):
        nfa.is_final(["Even Number of Zeros", "Nowhere"])


def test_closure_of_single_name():
    nfa = samples.ends_with_abb_nfa()
    assert nfa.closure("q9") == frozenset(["q9"])
    assert nfa.closure("q5") == nfa.closure(["q5"])
    assert nfa.closure("q5") == frozenset(["q5", "q6", "q1", "q2", "q4", "q7"])
