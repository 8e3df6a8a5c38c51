"""
pdfscan Core Module
"""
from .line_reader import LineReader
from .models import IndirectRef, Fragment, ObjectOutcome, OutcomeKind, ScanContext
from .stream_decoder import StreamDecoder
from .cmap import CMapBuilder, CMapState
from .content_stream import ContentExtractor
from .fonts import extract_font_metadata
from .resolver import TextResolver
from .scanner import ObjectScanner, analyze_bytes, validate_header

__all__ = [
    # Reader
    'LineReader',
    # Models
    'IndirectRef', 'Fragment', 'ObjectOutcome', 'OutcomeKind', 'ScanContext',
    # Pipeline
    'StreamDecoder', 'CMapBuilder', 'CMapState', 'ContentExtractor',
    'extract_font_metadata', 'TextResolver',
    # Scanner
    'ObjectScanner', 'analyze_bytes', 'validate_header',
]
