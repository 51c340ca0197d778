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

from dataclasses import dataclass, field
from typing import Iterable

from google.cloud.bigtable_v2.types import ReadRowsResponse as ReadRowsResponsePB


@dataclass
class ReadRowsEntry:
    """One decoded cell returned from a read"""

    row_key: str
    value: str


@dataclass
class ReadRowsOutput:
    """
    Model class for the cells returned by a read

    Cells keep the order in which the server sent them. Cells whose row key
    or value is not valid utf-8 are left out.
    """

    entries: list[ReadRowsEntry] = field(default_factory=list)

    @classmethod
    def _from_chunks(
        cls, chunks: Iterable[ReadRowsResponsePB.CellChunk]
    ) -> ReadRowsOutput:
        """
        Decode the cell chunks of a ReadRows response

        Args:
          - chunks: chunks from a single ReadRowsResponse
        """
        entries: list[ReadRowsEntry] = []
        for chunk in chunks:
            try:
                row_key = bytes(chunk.row_key).decode("utf-8")
                value = bytes(chunk.value).decode("utf-8")
            except UnicodeDecodeError:
                continue
            entries.append(ReadRowsEntry(row_key=row_key, value=value))
        return cls(entries=entries)

    @classmethod
    def _from_pb(cls, response: ReadRowsResponsePB | None) -> ReadRowsOutput:
        """
        Creates an output from a ReadRows response message

        A missing response (empty stream) produces an empty output.
        """
        if response is None:
            return cls()
        return cls._from_chunks(response.chunks)
