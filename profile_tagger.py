#!/usr/bin/env python3
"""Profile nametagger to find performance bottlenecks."""

import cProfile
import io
import pstats

from nametagger import Tagger, TaggerOpts

entries = [
    ("John Smith", "John Smith"),
    ("Johnson Corp", "Johnson"),
    ("New York", "New York"),
    ("AT&T", "AT&T"),
    ("Jean-Paul", "Jean-Paul"),
    ("Cat", "cat"),
]

# Sample text
lines = [
    "Ask JOHNSON about the cat in new york, or John  Smith at AT&T.",
    "Jean Paul concatenated the catalogue for johnson corp",
    "nothing to see here " * 5,
] * 300  # Repeat for more meaningful results

tagger = Tagger(entries, TaggerOpts(fuzzy=True, whole_word=True, skip="symbol"))

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    for line in lines:
        _ = tagger.tag(line)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(30)  # Top 30 functions
print(s.getvalue())
