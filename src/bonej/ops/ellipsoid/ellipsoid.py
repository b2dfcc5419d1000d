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

"""An oriented ellipsoid with ordered semi-axes, used in ellipsoid factor style measurements."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

import numpy as np

from ..exceptions import InvalidArgumentError, NotInitializedError, NullArgumentError
from ..types import _is_finite_number, as_vector3
from .rotation import Rotator
from .sampling import unit_sphere_points
from .serialization import EllipsoidData, load_ellipsoid_data

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

__all__ = [
    "ORTHOGONALITY_TOLERANCE",
    "Ellipsoid",
]

logger = getLogger(__name__)

ORTHOGONALITY_TOLERANCE = 1e-10
"""Largest absolute dot product accepted between two normalised basis vectors."""


def _check_radius(value: Any, name: str) -> float:
    if not _is_finite_number(value):
        raise InvalidArgumentError(f"Radius {name} must be a finite number, got {value!r}")
    radius = float(value)
    if radius <= 0.0:
        raise InvalidArgumentError(f"Radius {name} must be positive, got {radius}")
    return radius


def _column_lengths(matrix: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Split the columns of a matrix into unit directions and lengths.

    Columns are divided by their largest component before the norm is taken, so the
    squares neither overflow nor underflow. Zero columns get zero length and stay zero.
    """
    scale = np.max(np.abs(matrix), axis=0)
    safe_scale = np.where(scale == 0.0, 1.0, scale)
    scaled = matrix / safe_scale
    norms = np.linalg.norm(scaled, axis=0)
    safe_norms = np.where(norms == 0.0, 1.0, norms)
    with np.errstate(over="ignore"):
        lengths = scale * norms
    return scaled / safe_norms, lengths


def _normalised_basis(basis: ArrayLike | None) -> NDArray[np.float64]:
    """Normalise the columns of a 3x3 basis and check that they are orthogonal.

    A 4x4 homogeneous matrix is accepted too, in which case only its upper-left 3x3 block is used.
    Returns the basis embedded in a new 4x4 matrix with no translation.
    """
    if basis is None:
        raise NullArgumentError("Orientation must not be None")
    try:
        matrix = np.array(basis, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError("Orientation must be a 3x3 matrix") from e
    if matrix.shape == (4, 4):
        matrix = matrix[:3, :3]
    if matrix.shape != (3, 3):
        raise InvalidArgumentError(f"Orientation must be a 3x3 matrix, got shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise InvalidArgumentError("Orientation must be finite")

    matrix, lengths = _column_lengths(matrix)
    if np.any(lengths == 0.0):
        raise InvalidArgumentError("Basis vectors must have non-zero length")

    for i, j in ((0, 1), (0, 2), (1, 2)):
        if abs(np.dot(matrix[:, i], matrix[:, j])) >= ORTHOGONALITY_TOLERANCE:
            raise InvalidArgumentError("Vectors must be orthogonal")

    orientation = np.eye(4)
    orientation[:3, :3] = matrix
    return orientation


def _sorted_semi_axes(
    u: ArrayLike | None, v: ArrayLike | None, w: ArrayLike | None
) -> tuple[list[float], NDArray[np.float64]]:
    """Order three semi-axis vectors by length.

    Returns the lengths in ascending order and the matching orientation.
    """
    vectors = [as_vector3(vector, name) for vector, name in ((u, "u"), (v, "v"), (w, "w"))]
    _, lengths = _column_lengths(np.column_stack(vectors))
    order = np.argsort(lengths, kind="stable")
    radii = [_check_radius(lengths[i], name) for i, name in zip(order, "abc")]
    orientation = _normalised_basis(np.column_stack([vectors[i] for i in order]))
    return radii, orientation


class Ellipsoid:
    """An ellipsoid with semi-axes a <= b <= c, a centroid and an orientation.

    The orientation maps the local axes of the ellipsoid to world axes: its first column
    is the direction of the a-axis, its second the b-axis and its third the c-axis.

    All getters return copies and all setters store copies, so the ellipsoid never
    shares mutable state with its callers.

    Example:
        >>> ellipsoid = Ellipsoid(3, 2, 4)
        >>> ellipsoid.a, ellipsoid.b, ellipsoid.c
        (2.0, 3.0, 4.0)
        >>> ellipsoid.init_sampling(MatrixRotator())
        >>> points = ellipsoid.sample_points(100)
    """

    def __init__(self, x: float, y: float, z: float) -> None:
        """
        :param x: A semi-axis length. The three lengths can be given in any order.
        :param y: A semi-axis length.
        :param z: A semi-axis length.
        """
        radii = sorted(_check_radius(value, name) for value, name in ((x, "x"), (y, "y"), (z, "z")))
        self._a, self._b, self._c = radii
        self._centroid = np.zeros(3)
        self._orientation = np.eye(4)
        self._rotator: Rotator | None = None

    @classmethod
    def from_semi_axes(cls, u: ArrayLike, v: ArrayLike, w: ArrayLike) -> Ellipsoid:
        """Create an ellipsoid from three orthogonal semi-axis vectors given in any order.

        The shortest vector becomes the a-axis and the longest the c-axis.
        """
        radii, orientation = _sorted_semi_axes(u, v, w)
        ellipsoid = cls(*radii)
        ellipsoid._orientation = orientation
        return ellipsoid

    @classmethod
    def from_dict(cls, data: dict[str, Any] | EllipsoidData) -> Ellipsoid:
        """Rebuild an ellipsoid from the output of `to_dict`."""
        ellipsoid_data = load_ellipsoid_data(data)
        ellipsoid = cls(*ellipsoid_data.radii)
        ellipsoid.centroid = ellipsoid_data.centroid
        ellipsoid.orientation = ellipsoid_data.orientation
        return ellipsoid

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return EllipsoidData(
            radii=(self._a, self._b, self._c),
            centroid=tuple(self._centroid.tolist()),
            orientation=tuple(tuple(row) for row in self._orientation[:3, :3].tolist()),
        ).model_dump(mode="json")

    @property
    def a(self) -> float:
        """The shortest semi-axis length."""
        return self._a

    @a.setter
    def a(self, value: float) -> None:
        radius = _check_radius(value, "a")
        if radius >= self._b:
            raise InvalidArgumentError(f"Radius a must be less than b ({self._b}), got {radius}")
        if radius >= self._c:
            raise InvalidArgumentError(f"Radius a must be less than c ({self._c}), got {radius}")
        self._a = radius

    @property
    def b(self) -> float:
        """The intermediate semi-axis length."""
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        radius = _check_radius(value, "b")
        if radius < self._a:
            raise InvalidArgumentError(f"Radius b must not be less than a ({self._a}), got {radius}")
        if radius > self._c:
            raise InvalidArgumentError(f"Radius b must not be greater than c ({self._c}), got {radius}")
        self._b = radius

    @property
    def c(self) -> float:
        """The longest semi-axis length."""
        return self._c

    @c.setter
    def c(self, value: float) -> None:
        radius = _check_radius(value, "c")
        if radius < self._a:
            raise InvalidArgumentError(f"Radius c must not be less than a ({self._a}), got {radius}")
        if radius < self._b:
            raise InvalidArgumentError(f"Radius c must not be less than b ({self._b}), got {radius}")
        self._c = radius

    def set_a(self, value: float) -> None:
        self.a = value

    def set_b(self, value: float) -> None:
        self.b = value

    def set_c(self, value: float) -> None:
        self.c = value

    def set_semi_axes(self, u: ArrayLike, v: ArrayLike, w: ArrayLike) -> None:
        """Replace the radii and the orientation with three orthogonal semi-axis vectors.

        The vectors can be given in any order, they are sorted by length.
        """
        radii, orientation = _sorted_semi_axes(u, v, w)
        self._a, self._b, self._c = radii
        self._orientation = orientation

    @property
    def centroid(self) -> NDArray[np.float64]:
        """A copy of the centre point in world coordinates."""
        return self._centroid.copy()

    @centroid.setter
    def centroid(self, point: ArrayLike) -> None:
        self._centroid = as_vector3(point, "centroid")

    @property
    def orientation(self) -> NDArray[np.float64]:
        """A copy of the orientation as a 4x4 homogeneous matrix with no translation.

        Set it with a 3x3 matrix whose columns are the a, b and c directions. The columns
        are normalised, so only their directions matter. They must be orthogonal, but a
        left-handed basis is accepted.
        """
        return self._orientation.copy()

    @orientation.setter
    def orientation(self, basis: ArrayLike) -> None:
        self._orientation = _normalised_basis(basis)

    @property
    def semi_axes(self) -> list[NDArray[np.float64]]:
        """The a, b and c semi-axes as world space vectors, in that order."""
        return [self._orientation[:3, i] * radius for i, radius in enumerate((self._a, self._b, self._c))]

    @property
    def volume(self) -> float:
        return (4.0 / 3.0) * np.pi * self._a * self._b * self._c

    def init_sampling(self, rotator: Rotator) -> None:
        """Bind the rotator used by `sample_points`. Calling again replaces the previous one."""
        if rotator is None:
            raise NullArgumentError("Rotator must not be None")
        self._rotator = rotator
        logger.debug(f"Sampling initialised with {rotator!r}")

    def sample_points(self, n: int) -> NDArray[np.float64]:
        """Sample n points on the surface of the ellipsoid.

        Points are spread over a unit sphere with a deterministic spiral, stretched to
        the radii, rotated to the orientation and moved to the centroid.

        :param n: The number of points, at least 1.
        :return: A new (n, 3) array of points in world coordinates.
        """
        if self._rotator is None:
            raise NotInitializedError("Sampling has not been initialised, call init_sampling() first")

        local = unit_sphere_points(n) * np.array([self._a, self._b, self._c])
        rotated = np.asarray(self._rotator.rotate(local, self._orientation[:3, :3]), dtype=np.float64)
        logger.debug(f"Sampled {n} points on {self!r}")
        return rotated + self._centroid

    def __repr__(self) -> str:
        return f"Ellipsoid(a={self._a}, b={self._b}, c={self._c}, centroid={self._centroid.tolist()})"
