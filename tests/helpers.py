from src.summary.reducer import Reducer
from src.summary.summarizer import Summarizer
from src.summary.records import ElementCount, SummaryRecord

def summarize_chunks(chunks, **kwargs):
    """Run chunks through a fresh Summarizer and return every emitted record."""
    return list(Summarizer(**kwargs).summarize(chunks))

def split_bytes(data: bytes, size: int):
    return [data[i:i + size] for i in range(0, len(data), size)]

def make_record(lines, elapsed, byte_count=None, char_count=None):
    if char_count is not None:
        elements = ElementCount.chars(char_count)
    else:
        elements = ElementCount.bytes(byte_count or 0)
    return SummaryRecord(elapsed_ms=elapsed, elements=elements, lines=lines)

def report_for(records):
    return Reducer().reduce(records)
