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

__all__ = [
    "BoneJError",
    "InvalidArgumentError",
    "NotInitializedError",
    "NullArgumentError",
]


class BoneJError(Exception):
    """Base class for errors raised by the BoneJ ops."""


class NullArgumentError(BoneJError, TypeError):
    """A required argument was None."""


class InvalidArgumentError(BoneJError, ValueError):
    """A value violates a positivity, finiteness, ordering or orthogonality constraint."""


class NotInitializedError(BoneJError, RuntimeError):
    """An operation was requested before the object was prepared for it."""
