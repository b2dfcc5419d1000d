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

from unittest import TestCase

import numpy as np
import numpy.testing as npt
from parameterized import parameterized

from bonej.ops import BoneJError, InvalidArgumentError, NotInitializedError, NullArgumentError, Point3
from bonej.ops.types import _is_finite_number, as_vector3


class TestTypes(TestCase):
    def test_point3(self):
        point = Point3(1, 2, 3)
        self.assertEqual((point.x, point.y, point.z), (1, 2, 3))

    @parameterized.expand(
        [
            ("int", 3, True),
            ("float", 2.5, True),
            ("numpy_float", np.float32(1.5), True),
            ("nan", float("nan"), False),
            ("inf", np.inf, False),
            ("huge_int", 10**400, False),
            ("string", "1", False),
            ("bool", True, False),
            ("none", None, False),
        ]
    )
    def test_is_finite_number(self, _name, value, expected):
        self.assertEqual(_is_finite_number(value), expected)

    def test_as_vector3_copies(self):
        source = np.array([1.0, 2.0, 3.0])
        vector = as_vector3(source)

        source[0] = 10.0

        npt.assert_array_equal(vector, [1, 2, 3])
        self.assertEqual(vector.dtype, np.float64)

    def test_as_vector3_from_point(self):
        npt.assert_array_equal(as_vector3(Point3(1, 2, 3)), [1, 2, 3])

    def test_as_vector3_none(self):
        with self.assertRaises(NullArgumentError) as ctx:
            as_vector3(None, "centroid")
        self.assertIn("centroid", str(ctx.exception))

    @parameterized.expand(
        [
            ("scalar", 1.0),
            ("matrix", np.eye(3)),
            ("inf", [0, np.inf, 0]),
        ]
    )
    def test_as_vector3_invalid(self, _name, value):
        with self.assertRaises(InvalidArgumentError):
            as_vector3(value)


class TestExceptions(TestCase):
    @parameterized.expand(
        [
            (NullArgumentError, TypeError),
            (InvalidArgumentError, ValueError),
            (NotInitializedError, RuntimeError),
        ]
    )
    def test_hierarchy(self, error, builtin):
        self.assertTrue(issubclass(error, BoneJError))
        self.assertTrue(issubclass(error, builtin))
