from dataclasses import dataclass, field
from enum import Enum

class ElementKind(str, Enum):
    BYTES = "bytes"
    CHARS = "chars"

@dataclass(frozen=True)
class ElementCount:
    """Either a byte count or a character count, never both."""
    kind: ElementKind
    value: int = 0

    @classmethod
    def bytes(cls, value: int = 0) -> "ElementCount":
        return cls(ElementKind.BYTES, value)

    @classmethod
    def chars(cls, value: int = 0) -> "ElementCount":
        return cls(ElementKind.CHARS, value)

@dataclass(frozen=True)
class SummaryRecord:
    """Cumulative snapshot emitted by the Summarizer after each chunk."""
    elapsed_ms: int = 0
    elements: ElementCount = field(default_factory=ElementCount.bytes)
    lines: int = 0

    @property
    def element_name(self) -> str:
        return self.elements.kind.value

    def to_dict(self) -> dict:
        return {
            "elapsed": self.elapsed_ms,
            self.element_name: self.elements.value,
            "lines": self.lines,
        }
