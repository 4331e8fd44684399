import codecs
import locale
import time
from typing import Callable, Iterable, Iterator, Optional, Union
from src.summary.records import ElementCount, SummaryRecord

Chunk = Union[bytes, bytearray, memoryview, str]

LINE_FEED = "\n"
LINE_FEED_BYTE = b"\n"
DEFAULT_TEXT_ENCODING = "utf-8"

class Summarizer:
    """
    Turns a sequence of raw chunks into cumulative SummaryRecord snapshots.

    Counts encoded bytes by default, or decoded characters when count_chars
    is set. Lines are counted by scanning for LF only, so a CR+LF pair split
    across two chunks is counted once, in the chunk holding the LF.

    Byte chunks are decoded with an incremental decoder, which holds back
    the leading bytes of a multi-byte character until the chunk completing
    it arrives. Malformed input is decoded with replacement characters and
    never raises.
    """

    def __init__(self, count_chars: bool = False, encoding: Optional[str] = None,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.count_chars = bool(count_chars)
        self.encoding = encoding
        self._clock = clock
        self._start = clock()
        self._elements = 0
        self._lines = 0
        self._decoder = None
        if count_chars or encoding:
            decoder_encoding = encoding or locale.getpreferredencoding(False)
            self._decoder = codecs.getincrementaldecoder(decoder_encoding)(errors="replace")
        self._encoder = codecs.getincrementalencoder(encoding or DEFAULT_TEXT_ENCODING)(errors="replace")

    @staticmethod
    def count_lines(text: Union[str, bytes]) -> int:
        terminator = LINE_FEED if isinstance(text, str) else LINE_FEED_BYTE
        count = 0
        pos = text.find(terminator)
        while pos != -1:
            count += 1
            pos = text.find(terminator, pos + 1)
        return count

    def _measure(self, chunk: Chunk):
        """Return (element contribution, text or raw bytes to scan for LF)."""
        if isinstance(chunk, str):
            if self.count_chars:
                return len(chunk), chunk
            encoded = self._encoder.encode(chunk)
            return len(encoded), chunk

        raw = bytes(chunk)
        if self._decoder is None:
            return len(raw), raw
        text = self._decoder.decode(raw)
        return (len(text) if self.count_chars else len(raw)), text

    def _advance(self, contribution: int, scanned: Union[str, bytes]) -> SummaryRecord:
        self._elements += contribution
        if not self._lines and self._elements:
            # any data at all is a first line
            self._lines = 1
        self._lines += self.count_lines(scanned)
        return self.snapshot()

    def update(self, chunk: Chunk) -> SummaryRecord:
        contribution, scanned = self._measure(chunk)
        return self._advance(contribution, scanned)

    def finish(self) -> Optional[SummaryRecord]:
        """Flush a dangling partial character; returns a record only in char mode when one was pending."""
        if self._decoder is None:
            return None
        tail = self._decoder.decode(b"", final=True)
        if not tail or not self.count_chars:
            # byte mode already counted the raw bytes behind the tail
            return None
        return self._advance(len(tail), tail)

    def snapshot(self) -> SummaryRecord:
        elapsed_ms = max(round((self._clock() - self._start) * 1000), 0)
        if self.count_chars:
            elements = ElementCount.chars(self._elements)
        else:
            elements = ElementCount.bytes(self._elements)
        return SummaryRecord(elapsed_ms=elapsed_ms, elements=elements, lines=self._lines)

    def summarize(self, chunks: Iterable[Chunk]) -> Iterator[SummaryRecord]:
        for chunk in chunks:
            yield self.update(chunk)
        last = self.finish()
        if last is not None:
            yield last
