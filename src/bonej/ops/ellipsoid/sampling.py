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

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any

import numpy as np

from ..exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from numpy.typing import NDArray

__all__ = [
    "GOLDEN_ANGLE",
    "unit_sphere_points",
]

GOLDEN_ANGLE = np.pi * (3.0 - np.sqrt(5.0))
"""Azimuthal step between consecutive spiral points, in radians."""


def unit_sphere_points(n: int) -> NDArray[np.floating[Any]]:
    """Generate n quasi-uniform points on the unit sphere with a golden-angle spiral.

    The points depend only on n, so repeated calls give the same distribution.

    :param n: The number of points, at least 1.
    :return: A new (n, 3) array of unit vectors.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgumentError(f"Number of points must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgumentError(f"Number of points must be positive, got {n}")

    i = np.arange(n, dtype=np.float64)
    # Heights at the centres of n equal-area bands
    z = 1.0 - (2.0 * i + 1.0) / n
    r = np.sqrt(1.0 - z * z)
    theta = GOLDEN_ANGLE * i

    return np.column_stack((r * np.cos(theta), r * np.sin(theta), z))
