import pytest
from itertools import count

MULTIBYTE_LINE = "Grüße aus Köln, 東京 und Zürich ✓ ± naïve café\n"

@pytest.fixture
def fake_clock():
    """Clock advancing 5ms per call, starting at zero on the first call."""
    ticks = count()
    return lambda: next(ticks) * 0.005

@pytest.fixture
def multibyte_sample():
    """Returns the sample text plus its byte and char lengths."""
    text = MULTIBYTE_LINE * 120
    return text, len(text.encode("utf-8")), len(text)

@pytest.fixture
def multibyte_file(tmp_path, multibyte_sample):
    text, _, _ = multibyte_sample
    path = tmp_path / "multibyte.txt"
    path.write_bytes(text.encode("utf-8"))
    return path
