"""SVG transform attribute parsing, matrix decomposition and arc re-fitting."""

from svgtransform.arc import transform_arc, transform_arc_segment
from svgtransform.decompose import matrix_to_transform
from svgtransform.matrix import (
    apply_to_points,
    multiply_matrices,
    transform_to_matrix,
    transforms_multiply,
)
from svgtransform.options import TransformOptions
from svgtransform.parser import parse_transform_list
from svgtransform.pipeline import Pipeline, create_pipeline, normalize_transform
from svgtransform.primitives import IDENTITY, Matrix, Transform
from svgtransform.serializer import stringify_transforms

__all__ = [
    "IDENTITY",
    "Matrix",
    "Pipeline",
    "Transform",
    "TransformOptions",
    "apply_to_points",
    "create_pipeline",
    "matrix_to_transform",
    "multiply_matrices",
    "normalize_transform",
    "parse_transform_list",
    "stringify_transforms",
    "transform_arc",
    "transform_arc_segment",
    "transform_to_matrix",
    "transforms_multiply",
]
