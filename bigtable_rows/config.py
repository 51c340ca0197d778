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

import os
from dataclasses import dataclass
from typing import Mapping

from bigtable_rows._helpers import DEFAULT_API_ENDPOINT
from bigtable_rows._helpers import DEFAULT_APP_PROFILE_ID


@dataclass(frozen=True)
class Settings:
    """Process settings, read from the environment at startup"""

    port: str = ""
    log_level: str = "info"
    project: str | None = None
    instance_id: str | None = None
    app_profile_id: str = DEFAULT_APP_PROFILE_ID
    api_endpoint: str = DEFAULT_API_ENDPOINT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Load settings from environment variables

        Args:
          - environ: mapping to read from. Defaults to os.environ
        """
        if environ is None:
            environ = os.environ
        return cls(
            port=environ.get("PORT", ""),
            log_level=environ.get("LOG_LEVEL", "info"),
            project=environ.get("BIGTABLE_PROJECT") or None,
            instance_id=environ.get("BIGTABLE_INSTANCE") or None,
            app_profile_id=environ.get("BIGTABLE_APP_PROFILE", DEFAULT_APP_PROFILE_ID),
            api_endpoint=environ.get("BIGTABLE_ENDPOINT", DEFAULT_API_ENDPOINT),
        )

    @property
    def bind_port(self) -> int:
        """
        The port to listen on

        Raises:
          - ValueError if PORT is unset or not a valid port number
        """
        try:
            port = int(self.port)
        except ValueError:
            raise ValueError(f"failed to bind port: invalid port {self.port!r}") from None
        if not 0 <= port <= 65535:
            raise ValueError(f"failed to bind port: port {port} out of range")
        return port
