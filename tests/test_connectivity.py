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

"""Tests for the connectivity arithmetic."""

import unittest

from parameterized import parameterized

from bonej.ops.connectivity import NEGATIVE_CONNECTIVITY, ConnectivityResult, calculate_connectivity
from bonej.ops.exceptions import InvalidArgumentError


class TestConnectivity(unittest.TestCase):
    def test_connectivity(self):
        """A single particle with five handles has connectivity five."""
        result = calculate_connectivity(-4.0, 0.0, n_elements=1000, element_size=0.5)

        self.assertEqual(result.euler_characteristic, -4.0)
        self.assertEqual(result.corrected_euler, -4.0)
        self.assertEqual(result.connectivity, 5.0)
        self.assertAlmostEqual(result.connectivity_density, 5.0 / 500.0)

    def test_edge_correction_is_subtracted(self):
        result = calculate_connectivity(-10.0, -2.5, n_elements=8)
        self.assertEqual(result.corrected_euler, -7.5)
        self.assertEqual(result.connectivity, 8.5)
        self.assertAlmostEqual(result.connectivity_density, 8.5 / 8)

    def test_negative_connectivity_logs_warning(self):
        with self.assertLogs("bonej.ops.connectivity", level="WARNING") as logs:
            result = calculate_connectivity(3.0, 0.0, n_elements=27)

        self.assertEqual(result.connectivity, -2.0)
        self.assertIn(NEGATIVE_CONNECTIVITY.strip(), logs.output[0])

    def test_to_dict(self):
        result = ConnectivityResult(1.0, 1.0, 0.0, 0.0)
        self.assertEqual(
            result.to_dict(),
            {
                "euler_characteristic": 1.0,
                "corrected_euler": 1.0,
                "connectivity": 0.0,
                "connectivity_density": 0.0,
            },
        )

    @parameterized.expand(
        [
            ("nan_euler", float("nan"), 0.0, 10, 1.0),
            ("inf_correction", 1.0, float("inf"), 10, 1.0),
            ("no_elements", 1.0, 0.0, 0, 1.0),
            ("negative_size", 1.0, 0.0, 10, -1.0),
            ("string_elements", 1.0, 0.0, "5", 1.0),
            ("string_euler", "1", 0.0, 10, 1.0),
            ("bool_size", 1.0, 0.0, 10, True),
            ("zero_size", 1.0, 0.0, 10, 0.0),
        ]
    )
    def test_invalid_input_raises(self, _name, euler, correction, n_elements, element_size):
        with self.assertRaises(InvalidArgumentError):
            calculate_connectivity(euler, correction, n_elements, element_size)


if __name__ == "__main__":
    unittest.main()
