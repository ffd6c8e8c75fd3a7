import random
import threading

from fsalib import samples
from fsalib.util import random_strings


def test_concurrent_analyze():
    # A frozen automaton is shared by every thread
    nfa = samples.ends_with_abb_nfa()
    rng = random.Random(11)
    domain = list(random_strings(300, max_length=256, rng=rng))
    expected = [s.endswith("abb") for s in domain]
    errors = []

    class AnalyzerThread(threading.Thread):
        def run(self):
            order = list(range(len(domain)))
            random.shuffle(order)
            for i in order:
                if nfa.analyze(domain[i]) != expected[i]:
                    errors.append((self.name, domain[i]))

    threads = [AnalyzerThread() for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
