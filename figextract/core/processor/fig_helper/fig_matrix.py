# figextract/core/processor/fig_helper/fig_matrix.py
"""
Affine Matrix to CSS Transform

Node transforms are stored as the top two rows of a 2D affine matrix:

    [m00  m01  m02]   [a  c  tx]
    [m10  m11  m12] = [b  d  ty]
    [0    0    1  ]   [0  0  1 ]

decompose_matrix() splits it into translation, rotation, scale and a
horizontal skew, in that order of application.
"""
import math
import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Optional

from figextract.core.processor.fig_helper.fig_constants import (
    MATRIX_FIELDS,
    SCALE_EPSILON,
    TRANSFORM_KEY,
)
from figextract.core.processor.fig_helper.fig_reader import finite_or_none

logger = logging.getLogger("document-processor.FIG")


@dataclass
class CssTransform:
    """Decomposed transform. Angles are in degrees."""
    x: float
    y: float
    rotation: float
    scale_x: float
    scale_y: float
    skew_x: float

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            'x': finite_or_none(self.x),
            'y': finite_or_none(self.y),
            'rotation': finite_or_none(self.rotation),
            'scaleX': finite_or_none(self.scale_x),
            'scaleY': finite_or_none(self.scale_y),
            'skewX': finite_or_none(self.skew_x),
        }


def decompose_matrix(m00: float, m01: float, m02: float,
                     m10: float, m11: float, m12: float) -> CssTransform:
    """
    Decompose an affine matrix into CSS transform components.

    The first column gives scaleX and rotation; the determinant divided by
    scaleX gives scaleY (negative for mirrored transforms). A degenerate
    first column (scaleX ~ 0) falls back to the second column's length and
    zero skew.

    Args:
        m00, m01, m02: First matrix row
        m10, m11, m12: Second matrix row

    Returns:
        CssTransform
    """
    column_sq = m00 * m00 + m10 * m10
    scale_x = math.sqrt(column_sq)
    rotation = math.degrees(math.atan2(m10, m00))
    det = m00 * m11 - m01 * m10

    if abs(scale_x) > SCALE_EPSILON:
        scale_y = det / scale_x
        skew_x = math.degrees(math.atan((m00 * m01 + m10 * m11) / column_sq))
    else:
        scale_y = math.sqrt(m01 * m01 + m11 * m11)
        skew_x = 0.0

    return CssTransform(
        x=m02,
        y=m12,
        rotation=rotation,
        scale_x=scale_x,
        scale_y=scale_y,
        skew_x=skew_x,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _matrix_values(transform: Any) -> Optional[Dict[str, float]]:
    if not isinstance(transform, dict):
        return None
    if not all(_is_number(transform.get(name)) for name in MATRIX_FIELDS):
        return None
    return {name: float(transform[name]) for name in MATRIX_FIELDS}


def transform_matrix_to_css(tree: Any) -> None:
    """
    Replace every complete "transform" matrix in the tree, in place.

    Transforms missing a component, or holding non-numeric components, are
    left untouched.
    """
    if isinstance(tree, dict):
        if TRANSFORM_KEY in tree:
            values = _matrix_values(tree[TRANSFORM_KEY])
            if values is not None:
                tree[TRANSFORM_KEY] = decompose_matrix(**values).to_dict()
            else:
                logger.debug("Skipping transform without a complete numeric matrix")

        for value in tree.values():
            transform_matrix_to_css(value)

    elif isinstance(tree, list):
        for item in tree:
            transform_matrix_to_css(item)


__all__ = [
    'CssTransform',
    'decompose_matrix',
    'transform_matrix_to_css',
]
