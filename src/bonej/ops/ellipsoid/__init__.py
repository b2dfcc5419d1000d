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

from .ellipsoid import ORTHOGONALITY_TOLERANCE, Ellipsoid
from .rotation import MatrixRotator, QuaternionRotator, Rotator
from .sampling import GOLDEN_ANGLE, unit_sphere_points
from .serialization import EllipsoidData

__all__ = [
    "GOLDEN_ANGLE",
    "ORTHOGONALITY_TOLERANCE",
    "Ellipsoid",
    "EllipsoidData",
    "MatrixRotator",
    "QuaternionRotator",
    "Rotator",
    "unit_sphere_points",
]
