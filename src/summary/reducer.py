from typing import Iterable
from src.summary.records import SummaryRecord

REPORT_FORMAT = "lines: {lines} {name}: {count} elapsed: {elapsed}ms rate: {rate} {name}/s\n"

class Reducer:
    """
    Keeps the most recent SummaryRecord and formats the final report line.

    An empty stream reports the default record (0 lines, 0 bytes, 0ms).
    A zero elapsed time reports a rate of 0.
    """

    def __init__(self) -> None:
        self.last = SummaryRecord()

    def update(self, record: SummaryRecord) -> None:
        self.last = record

    @staticmethod
    def rate(count: int, elapsed_ms: int) -> int:
        if elapsed_ms <= 0:
            return 0
        return (count * 1000) // elapsed_ms

    def report(self) -> str:
        s = self.last
        count = int(s.elements.value or 0)
        return REPORT_FORMAT.format(
            lines=s.lines,
            name=s.element_name,
            count=count,
            elapsed=s.elapsed_ms,
            rate=self.rate(count, s.elapsed_ms),
        )

    def reduce(self, records: Iterable[SummaryRecord]) -> str:
        for record in records:
            self.update(record)
        return self.report()
