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

from dataclasses import dataclass

from google.cloud.bigtable_v2.types import ReadRowsRequest as ReadRowsRequestPB
from google.cloud.bigtable_v2.types import RowSet as RowSetPB


@dataclass
class _RangePoint:
    """Model class for a point in a row range"""

    key: bytes
    is_inclusive: bool


@dataclass
class RowRange:
    start: _RangePoint | None
    end: _RangePoint | None

    def __init__(
        self,
        start_key: str | bytes | None = None,
        end_key: str | bytes | None = None,
        start_is_inclusive: bool | None = None,
        end_is_inclusive: bool | None = None,
    ):
        # check for invalid combinations of arguments
        if start_is_inclusive is None:
            start_is_inclusive = True
        elif start_key is None:
            raise ValueError("start_is_inclusive must be set with start_key")
        if end_is_inclusive is None:
            end_is_inclusive = False
        elif end_key is None:
            raise ValueError("end_is_inclusive must be set with end_key")
        # ensure that start_key and end_key are bytes
        if isinstance(start_key, str):
            start_key = start_key.encode()
        elif start_key is not None and not isinstance(start_key, bytes):
            raise ValueError("start_key must be a string or bytes")
        if isinstance(end_key, str):
            end_key = end_key.encode()
        elif end_key is not None and not isinstance(end_key, bytes):
            raise ValueError("end_key must be a string or bytes")

        self.start = (
            _RangePoint(start_key, start_is_inclusive)
            if start_key is not None
            else None
        )
        self.end = (
            _RangePoint(end_key, end_is_inclusive) if end_key is not None else None
        )

    def _to_dict(self) -> dict[str, bytes]:
        """Converts this object to a dictionary"""
        output = {}
        if self.start is not None:
            key = "start_key_closed" if self.start.is_inclusive else "start_key_open"
            output[key] = self.start.key
        if self.end is not None:
            key = "end_key_closed" if self.end.is_inclusive else "end_key_open"
            output[key] = self.end.key
        return output

    def __contains__(self, row_key: object) -> bool:
        """
        Check whether a row key falls inside this range

        Open bounds exclude their own key, so a range whose open start and
        open end are the same key contains nothing.
        """
        if isinstance(row_key, str):
            row_key = row_key.encode()
        if not isinstance(row_key, bytes):
            return False
        if self.start is not None:
            if row_key < self.start.key:
                return False
            if row_key == self.start.key and not self.start.is_inclusive:
                return False
        if self.end is not None:
            if row_key > self.end.key:
                return False
            if row_key == self.end.key and not self.end.is_inclusive:
                return False
        return True


@dataclass
class ReadRowsInput:
    """Identifies the single row to read from a table"""

    table_name: str
    row_key: str

    def _row_range(self) -> RowRange:
        """
        Range sent to the server for this read

        Both bounds are the requested key and both are open.
        """
        return RowRange(
            start_key=self.row_key,
            end_key=self.row_key,
            start_is_inclusive=False,
            end_is_inclusive=False,
        )

    def _to_pb(self, table_name: str, app_profile_id: str) -> ReadRowsRequestPB:
        """
        Build the ReadRows request for this read

        Args:
          - table_name: fully resolved table name to send to the server
          - app_profile_id: the app profile to route the request through
        """
        return ReadRowsRequestPB(
            table_name=table_name,
            app_profile_id=app_profile_id,
            rows=RowSetPB(row_ranges=[self._row_range()._to_dict()]),
            rows_limit=0,
            reversed=False,
        )
