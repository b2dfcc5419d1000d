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

"""Connectivity of a trabecular network from its Euler characteristic.

The Euler characteristic and its edge correction come from the topology ops of an
image processing library; this module only does the arithmetic that turns them into
connectivity and connectivity density.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Any

from .exceptions import InvalidArgumentError
from .types import _is_finite_number

__all__ = [
    "NEGATIVE_CONNECTIVITY",
    "ConnectivityResult",
    "calculate_connectivity",
]

logger = getLogger(__name__)

NEGATIVE_CONNECTIVITY = (
    "Connectivity is negative.\n"
    "This usually happens if there are multiple particles or enclosed cavities.\n"
    "Try running Purify prior to Connectivity.\n"
)


@dataclass(frozen=True)
class ConnectivityResult:
    """Connectivity measurements of one 3D image."""

    euler_characteristic: float
    """The Euler characteristic (χ) of the foreground."""

    corrected_euler: float
    """The Euler characteristic with the edge correction removed (χ + Δχ)."""

    connectivity: float
    """The number of redundant connections, 1 - (χ + Δχ)."""

    connectivity_density: float
    """Connectivity per unit volume of the image."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "euler_characteristic": self.euler_characteristic,
            "corrected_euler": self.corrected_euler,
            "connectivity": self.connectivity,
            "connectivity_density": self.connectivity_density,
        }


def calculate_connectivity(
    euler_characteristic: float,
    edge_correction: float,
    n_elements: int,
    element_size: float = 1.0,
) -> ConnectivityResult:
    """Calculate connectivity and connectivity density.

    :param euler_characteristic: The Euler characteristic of the foreground, 26-connected.
    :param edge_correction: The contribution of the image edges to the Euler characteristic.
    :param n_elements: The number of voxels in the image.
    :param element_size: The calibrated volume of one voxel.
    :return: The connectivity measurements.
    """
    for value, name in ((euler_characteristic, "euler_characteristic"), (edge_correction, "edge_correction")):
        if not _is_finite_number(value):
            raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")
    if not _is_finite_number(n_elements) or n_elements <= 0:
        raise InvalidArgumentError(f"n_elements must be positive, got {n_elements!r}")
    if not _is_finite_number(element_size) or element_size <= 0:
        raise InvalidArgumentError(f"element_size must be positive, got {element_size!r}")

    corrected_euler = float(euler_characteristic) - float(edge_correction)
    result = 1.0 - corrected_euler
    if result < 0:
        logger.warning(NEGATIVE_CONNECTIVITY)

    return ConnectivityResult(
        euler_characteristic=float(euler_characteristic),
        corrected_euler=corrected_euler,
        connectivity=result,
        connectivity_density=result / (float(n_elements) * float(element_size)),
    )
