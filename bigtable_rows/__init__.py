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
from bigtable_rows.client import Bigtable
from bigtable_rows.client import BigtableClient
from bigtable_rows.exceptions import BigtableError
from bigtable_rows.exceptions import ClientInitializationError
from bigtable_rows.mutations import MutationSpec
from bigtable_rows.mutations import RowMutationEntry
from bigtable_rows.mutations import MutateRowsInput
from bigtable_rows.mutations import SERVER_SIDE_TIMESTAMP
from bigtable_rows.read_rows_query import ReadRowsInput
from bigtable_rows.read_rows_query import RowRange
from bigtable_rows.row import ReadRowsEntry
from bigtable_rows.row import ReadRowsOutput

__version__ = "0.1.0"

__all__ = (
    "Bigtable",
    "BigtableClient",
    "BigtableError",
    "ClientInitializationError",
    "MutationSpec",
    "RowMutationEntry",
    "MutateRowsInput",
    "SERVER_SIDE_TIMESTAMP",
    "ReadRowsInput",
    "RowRange",
    "ReadRowsEntry",
    "ReadRowsOutput",
)
