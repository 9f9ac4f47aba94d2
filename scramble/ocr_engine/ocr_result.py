"""
OCR Payload Data Classes.

This module defines the data structures the interpreter consumes from
an external OCR provider: recognized text, and optionally one token per
word with a four-corner bounding polygon.

Classes:
    RecognizedToken: Single text fragment with its bounding polygon
    TextRow: Tokens judged to share a horizontal band
    OCRPayload: Complete OCR output for one scorecard photo
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple, Union
import json

from scramble.utils.exceptions import PayloadError, OCRProcessingError, FileNotFoundError

Vertex = Tuple[int, int]


@dataclass(frozen=True)
class RecognizedToken:
    """
    A single text fragment recognized by the OCR provider.

    Attributes:
        text: The recognized text content
        vertices: Four (x, y) corners of the bounding polygon

    Example:
        >>> token = RecognizedToken(
        ...     text="Hcap",
        ...     vertices=((100, 50), (160, 50), (160, 80), (100, 80))
        ... )
        >>> token.top, token.left
        (50, 100)
    """
    text: str
    vertices: Tuple[Vertex, ...] = ()

    @property
    def top(self) -> int:
        """Topmost vertical coordinate."""
        return min((y for _, y in self.vertices), default=0)

    @property
    def left(self) -> int:
        """Leftmost horizontal coordinate."""
        return min((x for x, _ in self.vertices), default=0)

    @property
    def bottom(self) -> int:
        return max((y for _, y in self.vertices), default=0)

    @property
    def right(self) -> int:
        return max((x for x, _ in self.vertices), default=0)

    @property
    def bbox(self) -> Tuple[int, int, int, int]:
        """Axis-aligned bounding box as (x1, y1, x2, y2)."""
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_annotation(cls, annotation: Dict[str, Any]) -> 'RecognizedToken':
        """
        Build a token from a Vision-style text annotation.

        The provider omits a coordinate when it is zero, so missing
        ``x``/``y`` keys read as 0.

        Args:
            annotation: Mapping with ``description`` and
                ``boundingPoly.vertices``.

        Returns:
            RecognizedToken instance.

        Raises:
            PayloadError: If the annotation is not a mapping.
        """
        if not isinstance(annotation, dict):
            raise PayloadError(f"annotation must be an object, got {type(annotation).__name__}")

        poly = annotation.get('boundingPoly') or {}
        vertices = tuple(
            (int(v.get('x', 0)), int(v.get('y', 0)))
            for v in poly.get('vertices', [])
        )
        return cls(text=str(annotation.get('description', '')), vertices=vertices)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the Vision annotation shape."""
        return {
            'description': self.text,
            'boundingPoly': {
                'vertices': [{'x': x, 'y': y} for x, y in self.vertices]
            }
        }

    def __repr__(self) -> str:
        return f"RecognizedToken('{self.text}', top={self.top}, left={self.left})"


@dataclass
class TextRow:
    """
    Tokens sharing a horizontal band, ordered left to right.

    Attributes:
        tokens: Tokens in the row
        top: Vertical position the row was established at
        row_index: Index of this row, top to bottom
    """
    tokens: List[RecognizedToken] = field(default_factory=list)
    top: int = 0
    row_index: int = 0

    @property
    def texts(self) -> List[str]:
        """Token texts in left-to-right order."""
        return [token.text for token in self.tokens]

    @property
    def text(self) -> str:
        """Full text of the row."""
        return ' '.join(self.texts)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass
class OCRPayload:
    """
    Complete OCR output for a single scorecard photo.

    Attributes:
        text: Full recognized text, newline separated
        tokens: Per-word tokens with geometry (may be empty)
        source: Where the payload came from, for logging

    Example:
        >>> payload = OCRPayload.from_dict({"text": "Name\\nJOHN SMITH"})
        >>> payload.has_geometry
        False
        >>> payload.lines
        ['Name', 'JOHN SMITH']
    """
    text: str = ""
    tokens: List[RecognizedToken] = field(default_factory=list)
    source: Optional[str] = None

    @property
    def has_geometry(self) -> bool:
        """True when positional token data is available."""
        return any(token.vertices for token in self.tokens)

    @property
    def lines(self) -> List[str]:
        """Non-empty, trimmed lines of the full text."""
        cleaned = self.text.replace('\r', '')
        return [line.strip() for line in cleaned.split('\n') if line.strip()]

    def is_empty(self) -> bool:
        """Check if the payload holds no text at all."""
        return not self.text.strip() and not self.tokens

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> 'OCRPayload':
        """
        Create a payload from the OCR proxy response.

        Accepts ``{"text": ..., "annotations": [...]}``. When the first
        annotation only repeats the full text (the provider's page-level
        entry), it is dropped. A response flagged ``"ok": false`` or
        carrying an ``error`` is a provider failure.

        Args:
            data: Response dictionary.
            source: Optional source label.

        Returns:
            OCRPayload instance.

        Raises:
            OCRProcessingError: If the provider reported a failure.
            PayloadError: If the response has the wrong shape.
        """
        if not isinstance(data, dict):
            raise PayloadError("payload must be a JSON object", source)

        if data.get('ok') is False or data.get('error'):
            reason = data.get('error') or data.get('message') or "unknown provider error"
            raise OCRProcessingError(source or "payload", str(reason))

        text = data.get('text') or ''
        if not isinstance(text, str):
            raise PayloadError("'text' must be a string", source)

        annotations = data.get('annotations') or []
        if not isinstance(annotations, list):
            raise PayloadError("'annotations' must be a list", source)

        tokens = [RecognizedToken.from_annotation(a) for a in annotations]
        if tokens and text and tokens[0].text.strip() == text.strip() and '\n' in text.strip():
            tokens = tokens[1:]

        return cls(text=text, tokens=tokens, source=source)

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'OCRPayload':
        """
        Load a payload from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            PayloadError: If the file is not valid JSON.
        """
        path = Path(filepath)
        if not path.is_file():
            raise FileNotFoundError(str(path))

        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise PayloadError(f"not valid JSON ({e})", str(path)) from e

        return cls.from_dict(data, source=str(path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        return {
            'text': self.text,
            'annotations': [t.to_dict() for t in self.tokens]
        }

    def __repr__(self) -> str:
        return (
            f"OCRPayload(lines={len(self.lines)}, tokens={len(self.tokens)}, "
            f"geometry={self.has_geometry})"
        )
