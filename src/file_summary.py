import argparse
import codecs
import sys
from config import settings
from src.summary.pipeline import SummaryPipeline
from src.utils.exceptions import InvalidEncodingError, SourceReadError

def validate_encoding(name):
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise InvalidEncodingError(f"Invalid encoding {name}") from e
    return name

def build_parser():
    parser = argparse.ArgumentParser(prog="file-summary",
                                     description="Summarize lines, bytes or characters and throughput of a file")
    parser.add_argument('source', help="File to summarize, or - for standard input")
    parser.add_argument('--verbose', action='store_true', default=settings.verbose,
                        help="Log an intermediate summary for every chunk read")
    parser.add_argument('--chars', dest='count_chars', action='store_true', default=settings.count_chars,
                        help="Count decoded characters instead of bytes")
    parser.add_argument('--encoding', default=settings.encoding, help="Text encoding of the input")
    parser.add_argument('--chunk-size', type=int, default=settings.chunk_size,
                        help="Bytes read from the source per chunk")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.encoding:
        try:
            validate_encoding(args.encoding)
        except InvalidEncodingError as e:
            parser.error(str(e))
    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    pipeline = SummaryPipeline(count_chars=args.count_chars,
                               encoding=args.encoding,
                               verbose=args.verbose,
                               chunk_size=args.chunk_size)
    try:
        pipeline.write_report(args.source, sys.stdout)
    except SourceReadError as e:
        print(f"file-summary: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
