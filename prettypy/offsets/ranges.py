from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of offsets into rendered output.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    def len(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


def line_ranges(source: str) -> list[TextRange]:
    """Ranges of every `\\n`-separated line in `source`, excluding the breaks.

    A source with no text still has one (empty) line.
    """
    ranges: list[TextRange] = []
    start = 0
    while True:
        end = source.find("\n", start)
        if end == -1:
            ranges.append(TextRange(start, len(source)))
            return ranges
        ranges.append(TextRange(start, end))
        start = end + 1
