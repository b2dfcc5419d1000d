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
from typing import Any, NamedTuple

import numpy as np
import numpy.typing as npt

from .exceptions import InvalidArgumentError, NullArgumentError

__all__ = [
    "Point3",
    "as_vector3",
]


class Point3(NamedTuple):
    """A 3D point defined by X, Y, and Z coordinates."""

    x: float
    y: float
    z: float


def as_vector3(value: npt.ArrayLike | None, name: str = "value") -> npt.NDArray[np.float64]:
    """Copy a point or vector into a new float64 array of shape (3,).

    :param value: Anything numpy can read as three numbers, e.g. a Point3, a list or an array.
    :param name: The argument name to use in error messages.
    :return: A new array that does not share memory with `value`.
    """
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
    try:
        array = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be three numbers") from e
    if array.shape != (3,):
        raise InvalidArgumentError(f"{name} must have shape (3,), got {array.shape}")
    if not np.all(np.isfinite(array)):
        raise InvalidArgumentError(f"{name} must be finite")
    return array


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except OverflowError:
        return False
