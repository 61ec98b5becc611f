from __future__ import annotations


class SequenceRng:
    """Stand-in for random.Random that hands out kinds from a fixed cycle."""

    def __init__(self, kinds):
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[self.calls % len(self.kinds)]
        self.calls += 1
        return kind
