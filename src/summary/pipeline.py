import logging
from typing import Iterable, Iterator, Optional, TextIO
from config import settings
from src.sources.reader_factory import ChunkReaderFactory
from src.summary.records import SummaryRecord
from src.summary.reducer import Reducer
from src.summary.summarizer import Summarizer
from src.utils.exceptions import SourceReadError
from src.utils.logger_config import setup_logger

class SummaryPipeline:
    """
    Wires a chunk source through the Summarizer into the Reducer.

    The stages are chained generators, so a chunk is read only after the
    previous one has been summarized and handed to the reducer. A failing
    source aborts the run and no report is produced.
    """

    def __init__(self, count_chars: Optional[bool] = None, encoding: Optional[str] = None,
                 verbose: Optional[bool] = None, chunk_size: Optional[int] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        self.count_chars = settings.count_chars if count_chars is None else count_chars
        self.encoding = encoding or settings.encoding
        self.verbose = settings.verbose if verbose is None else verbose
        self.chunk_size = chunk_size or settings.chunk_size
        self.logger = logger or setup_logger()
        if self.verbose and not self.logger.isEnabledFor(logging.INFO):
            self.logger.setLevel(logging.INFO)

    def _log_records(self, records: Iterable[SummaryRecord]) -> Iterator[SummaryRecord]:
        for record in records:
            self.logger.info("%s", record.to_dict())
            yield record

    def run(self, source) -> str:
        summarizer = Summarizer(count_chars=self.count_chars, encoding=self.encoding)
        reducer = Reducer()
        try:
            with ChunkReaderFactory(source, self.chunk_size) as chunks:
                records = summarizer.summarize(chunks)
                if self.verbose:
                    records = self._log_records(records)
                return reducer.reduce(records)
        except SourceReadError as e:
            self.logger.error("Aborting summary: %s", e)
            raise

    def write_report(self, source, out: TextIO) -> str:
        report = self.run(source)
        out.write(report)
        out.flush()
        return report
