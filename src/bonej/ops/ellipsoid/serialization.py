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

from typing import Any

import pydantic

from ..exceptions import InvalidArgumentError

__all__ = [
    "EllipsoidData",
    "load_ellipsoid_data",
]

FiniteFloat = pydantic.FiniteFloat
Triple = tuple[FiniteFloat, FiniteFloat, FiniteFloat]


class EllipsoidData(pydantic.BaseModel):
    """The serialised form of an ellipsoid.

    Only the shape of the document is checked here; the ellipsoid itself enforces
    axis ordering and orthogonality when it is rebuilt.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    radii: Triple
    """Semi-axis lengths a, b, c."""

    centroid: Triple = (0.0, 0.0, 0.0)
    """World position of the centre."""

    orientation: tuple[Triple, Triple, Triple] = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    """The 3x3 orientation block, row major."""


def load_ellipsoid_data(data: Any) -> EllipsoidData:
    """Validate a dictionary as EllipsoidData."""
    if isinstance(data, EllipsoidData):
        return data
    try:
        return EllipsoidData.model_validate(data)
    except pydantic.ValidationError as ve:
        raise InvalidArgumentError(f"Invalid ellipsoid data: {ve}") from ve
