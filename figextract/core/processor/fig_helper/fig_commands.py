# figextract/core/processor/fig_helper/fig_commands.py
"""
Path Command Blob Decoder

A "commands" blob is a flat stream of opcode bytes, each followed by its
little-endian f32 operands:

    0 -> Z (close)
    1 -> M x y
    2 -> L x y
    3 -> Q cx cy x y
    4 -> C cx1 cy1 cx2 cy2 x y

Decoded as a flat list such as ["M", 10.0, 20.0, "L", 30.0, 40.0, "Z"].
"""
import logging
from typing import Any, List, Optional

from figextract.core.processor.fig_helper.fig_constants import PATH_COMMANDS
from figextract.core.processor.fig_helper.fig_reader import (
    ByteCursor,
    ShortReadError,
    finite_or_none,
)

logger = logging.getLogger("document-processor.FIG")


def parse_commands(data: bytes) -> Optional[List[Any]]:
    """
    Decode a path command blob.

    Args:
        data: Blob bytes

    Returns:
        Flat list of tags and coordinates, or None if an opcode is unknown
        or the stream is truncated (no partial result)
    """
    cursor = ByteCursor(data)
    commands: List[Any] = []

    try:
        while not cursor.at_end():
            opcode = cursor.read_u8()
            command = PATH_COMMANDS.get(opcode)
            if command is None:
                logger.debug(f"Unknown path opcode {opcode} at offset {cursor.offset - 1}")
                return None

            tag, arg_count = command
            commands.append(tag)
            commands.extend(finite_or_none(v) for v in cursor.read_f32s(arg_count))
    except ShortReadError as e:
        logger.debug(f"Truncated path command blob: {e}")
        return None

    return commands


__all__ = ['parse_commands']
