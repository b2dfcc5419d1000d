#  Copyright © 2025 The BoneJ developers
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#      http://www.apache.org/licenses/LICENSE-2.0
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""Rotation primitives used to carry sampled points into world orientation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import numpy as np
from scipy.spatial.transform import Rotation

from ..exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

__all__ = [
    "MatrixRotator",
    "QuaternionRotator",
    "Rotator",
]


@runtime_checkable
class Rotator(Protocol):
    """Applies a 3D rotation to a batch of vectors.

    Implementations must return a new array and leave `vectors` untouched.
    """

    def rotate(self, vectors: ArrayLike, rotation: ArrayLike) -> NDArray[np.floating[Any]]:
        """Rotate each row of an (N, 3) array.

        :param vectors: The vectors to rotate, one per row.
        :param rotation: A 3x3 matrix in the pre-multiplication convention, `v_rotated = R @ v`.
        :return: A new (N, 3) array of rotated vectors.
        """
        ...


def _as_points(vectors: ArrayLike) -> NDArray[np.float64]:
    points = np.array(vectors, dtype=np.float64)
    if points.ndim == 1:
        points = points.reshape(1, -1)
    if points.ndim != 2 or points.shape[1] != 3:
        raise InvalidArgumentError("Vectors array must be of shape (N, 3)")
    return points


def _as_matrix(rotation: ArrayLike) -> NDArray[np.float64]:
    matrix = np.array(rotation, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise InvalidArgumentError(f"Rotation must be a 3x3 matrix, got shape {matrix.shape}")
    return matrix


class MatrixRotator:
    """Rotates vectors by direct matrix multiplication.

    Works for any orthonormal matrix, including left-handed (improper) ones.
    """

    def rotate(self, vectors: ArrayLike, rotation: ArrayLike) -> NDArray[np.floating[Any]]:
        points = _as_points(vectors)
        matrix = _as_matrix(rotation)
        return (matrix @ points.T).T

    def __repr__(self) -> str:
        return "MatrixRotator()"


class QuaternionRotator:
    """Rotates vectors through a unit quaternion built from the rotation matrix.

    A quaternion can only describe a proper rotation, so left-handed matrices are rejected.
    """

    def rotate(self, vectors: ArrayLike, rotation: ArrayLike) -> NDArray[np.floating[Any]]:
        points = _as_points(vectors)
        matrix = _as_matrix(rotation)
        if np.linalg.det(matrix) < 0:
            raise InvalidArgumentError("A quaternion cannot represent a left-handed basis")
        return Rotation.from_matrix(matrix).apply(points)

    def __repr__(self) -> str:
        return "QuaternionRotator()"
