# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
from __future__ import annotations


class BigtableError(Exception):
    """
    Raised when a Bigtable operation fails

    The message describes the failed operation followed by the underlying
    cause. The original exception is attached as ``__cause__``.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.__cause__ = cause

    @classmethod
    def _from_cause(cls, action: str, cause: Exception) -> BigtableError:
        """
        Build an error for a failed action, embedding the cause's message

        Args:
          - action: short description of what failed, e.g. "read rows"
          - cause: the exception raised by the transport
        """
        return cls(f"failed to {action}: {cause}", cause)


class ClientInitializationError(BigtableError):
    """Raised when the connection to Bigtable could not be set up"""
