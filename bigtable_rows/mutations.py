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

from typing import Any
from dataclasses import dataclass, field

from google.cloud.bigtable_v2.types import MutateRowsRequest as MutateRowsRequestPB

# special value for SetCell mutation timestamps. If set, server will assign a timestamp
SERVER_SIDE_TIMESTAMP = -1


@dataclass
class MutationSpec:
    """A single cell write, sent as a SetCell mutation"""

    family_name: str
    column_qualifier: str
    value: str

    def _to_dict(self) -> dict[str, Any]:
        """Convert the mutation to a dictionary representation"""
        return {
            "set_cell": {
                "family_name": self.family_name,
                "column_qualifier": self.column_qualifier.encode("utf-8"),
                "timestamp_micros": SERVER_SIDE_TIMESTAMP,
                "value": self.value.encode("utf-8"),
            }
        }


@dataclass
class RowMutationEntry:
    """All cell writes for one row of a batch"""

    row_key: str
    mutations: list[MutationSpec] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "row_key": self.row_key.encode("utf-8"),
            "mutations": [mutation._to_dict() for mutation in self.mutations],
        }


@dataclass
class MutateRowsInput:
    """
    A batch of row mutations against one table

    ``row_key`` is carried for callers but is not part of the request: only
    the row keys of ``entries`` are sent to the server.
    """

    table_name: str
    row_key: str
    entries: list[RowMutationEntry] = field(default_factory=list)

    def _to_pb(self, table_name: str, app_profile_id: str) -> MutateRowsRequestPB:
        """
        Build the MutateRows request for this batch

        Args:
          - table_name: fully resolved table name to send to the server
          - app_profile_id: the app profile to route the request through
        """
        return MutateRowsRequestPB(
            table_name=table_name,
            app_profile_id=app_profile_id,
            entries=[entry._to_dict() for entry in self.entries],
        )
