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

"""
Helper functions used in various places in the library.
"""

# app profile used when none is configured
DEFAULT_APP_PROFILE_ID = "default"

# well-known endpoint of the Bigtable data API
DEFAULT_API_ENDPOINT = "bigtable.googleapis.com"

# OAuth scope for reading and writing table data
DATA_SCOPE = "https://www.googleapis.com/auth/bigtable.data"


def _table_path(
    table_name: str, project: str | None, instance_id: str | None
) -> str:
    """
    Resolve the table name sent to the server.

    A bare table id is expanded into a full resource name when both a project
    and an instance are known. Anything else is passed through unchanged.
    """
    if table_name.startswith("projects/") or not (project and instance_id):
        return table_name
    return f"projects/{project}/instances/{instance_id}/tables/{table_name}"
