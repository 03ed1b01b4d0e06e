# figextract/__init__.py
"""
figextract - Figma / FigJam .fig file decoder

Turns the .fig binary container into a JSON-ready document tree.

Usage:
    from figextract import FigHandler, CallableDocumentDecoder

    handler = FigHandler(decoder=CallableDocumentDecoder(kiwi_decode))
    result = handler.convert_file("design.fig")
    # {"version": 48, "fileType": "figma", "document": {...}, "blobs": [...], "images": [...]}
"""
from figextract.core.functions import (
    BaseDocumentDecoder,
    CallableDocumentDecoder,
    DecodedDocument,
    FigError,
)
from figextract.core.processor import FigConfig, FigHandler

__version__ = "0.1.0"

__all__ = [
    'BaseDocumentDecoder',
    'CallableDocumentDecoder',
    'DecodedDocument',
    'FigConfig',
    'FigError',
    'FigHandler',
    '__version__',
]
