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
"""
In-memory Bigtable used by tests and local development.
"""
from __future__ import annotations

import time
from collections import defaultdict

from bigtable_rows.client import Bigtable
from bigtable_rows.exceptions import BigtableError
from bigtable_rows.mutations import MutateRowsInput
from bigtable_rows.read_rows_query import ReadRowsInput
from bigtable_rows.row import ReadRowsEntry
from bigtable_rows.row import ReadRowsOutput

# Type aliases used internally for readability.
row_key = bytes
family_id = str
qualifier = bytes
# (timestamp_micros, value)
cell_version = tuple[int, bytes]


def _server_timestamp_micros() -> int:
    # bigtable timestamps have millisecond granularity
    return (time.time_ns() // 1_000_000) * 1000


class FakeBigtable(Bigtable):
    """
    Bigtable implementation that keeps tables in memory

    Every input is recorded in ``mutate_row_calls`` / ``read_rows_calls``.
    Reads evaluate the same row range the real client sends. Set
    ``fail_with`` to make the next calls fail the way a transport error
    would.
    """

    def __init__(self):
        self.tables: dict[
            str, dict[row_key, dict[family_id, dict[qualifier, list[cell_version]]]]
        ] = defaultdict(
            lambda: defaultdict(lambda: defaultdict(lambda: defaultdict(list)))
        )
        self.mutate_row_calls: list[MutateRowsInput] = []
        self.read_rows_calls: list[ReadRowsInput] = []
        self.fail_with: Exception | None = None

    def _check_failure(self, action: str) -> None:
        if self.fail_with is not None:
            raise BigtableError._from_cause(action, self.fail_with)

    async def mutate_row(self, input: MutateRowsInput) -> None:
        self.mutate_row_calls.append(input)
        self._check_failure("mutate rows")
        table = self.tables[input.table_name]
        timestamp = _server_timestamp_micros()
        for entry in input.entries:
            row = table[entry.row_key.encode("utf-8")]
            for mutation in entry.mutations:
                versions = row[mutation.family_name][
                    mutation.column_qualifier.encode("utf-8")
                ]
                versions.append((timestamp, mutation.value.encode("utf-8")))
                # newest version first
                versions.sort(key=lambda version: version[0], reverse=True)

    async def read_rows(self, input: ReadRowsInput) -> ReadRowsOutput:
        self.read_rows_calls.append(input)
        self._check_failure("read rows")
        row_range = input._row_range()
        table = self.tables.get(input.table_name, {})
        entries: list[ReadRowsEntry] = []
        for key in sorted(k for k in table if k in row_range):
            row = table[key]
            for family in sorted(row):
                for column in sorted(row[family]):
                    for _, value in row[family][column]:
                        entries.append(
                            ReadRowsEntry(
                                row_key=key.decode("utf-8"),
                                value=value.decode("utf-8"),
                            )
                        )
        return ReadRowsOutput(entries=entries)

    def cells(self, table_name: str, key: str) -> dict[str, dict[str, list[str]]]:
        """
        Return the stored values of a row, newest version first

        Useful for asserting on writes, since point reads through
        :meth:`read_rows` never match a row.
        """
        row = self.tables.get(table_name, {}).get(key.encode("utf-8"), {})
        return {
            family: {
                column.decode("utf-8"): [value.decode("utf-8") for _, value in versions]
                for column, versions in columns.items()
            }
            for family, columns in row.items()
        }
