# figextract/core/processor/__init__.py
"""
Format handlers.

- base_handler.py: BaseHandler (config, decoder, logger)
- fig_handler.py: FigHandler / FigConfig for .fig and .jam files
- fig_helper/: container, blob, geometry and tree utilities
"""
from figextract.core.processor.base_handler import BaseHandler
from figextract.core.processor.fig_handler import FigConfig, FigHandler


__all__ = [
    'BaseHandler',
    'FigConfig',
    'FigHandler',
]
