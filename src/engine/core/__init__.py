"""
どこで: `engine.core` サブパッケージ。
何を: 4 成分 Tuple の代数と色バッファ Canvas、およびその例外。
なぜ: 幾何演算と出力の基盤を構成し、上位層（エクスポート/アプリ）から再利用可能にするため。
"""

from .canvas import Canvas
from .errors import (
    CanvasError,
    IncompatibleTupleError,
    InvalidDimensionsError,
    PixelOutOfBoundsError,
    TupleError,
    ZeroMagnitudeError,
)
from .tuples import (
    EPSILON,
    Tuple,
    TupleKind,
    add,
    color,
    cross_product,
    dot_product,
    equal_float,
    hadamard_product,
    magnitude,
    negate,
    normalize,
    point,
    scale,
    subtract,
    tuples_equal,
    vector,
)

__all__ = [
    "Canvas",
    "CanvasError",
    "IncompatibleTupleError",
    "InvalidDimensionsError",
    "PixelOutOfBoundsError",
    "TupleError",
    "ZeroMagnitudeError",
    "EPSILON",
    "Tuple",
    "TupleKind",
    "add",
    "color",
    "cross_product",
    "dot_product",
    "equal_float",
    "hadamard_product",
    "magnitude",
    "negate",
    "normalize",
    "point",
    "scale",
    "subtract",
    "tuples_equal",
    "vector",
]
