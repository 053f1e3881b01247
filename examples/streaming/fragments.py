"""Consume plain-text fragments lazily, with their source offsets."""

from ansistrip import iter_fragments, iter_spans

source = "\x1b]0;build\x07step \x1b[33m3/5\x1b[0m done"

for fragment in iter_fragments(source):
    print(repr(fragment))

for start, end in iter_spans(source):
    print(f"{start:3d}..{end:<3d} {source[start:end]!r}")
