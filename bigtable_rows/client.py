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

import abc
import logging
import os

from grpc import aio  # type: ignore
import google.auth
import google.auth.credentials
from google.api_core import client_options as client_options_lib
from google.api_core import exceptions as core_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud.environment_vars import BIGTABLE_EMULATOR

from google.cloud.bigtable_v2.services.bigtable.async_client import BigtableAsyncClient
from google.cloud.bigtable_v2.services.bigtable.transports.grpc_asyncio import (
    BigtableGrpcAsyncIOTransport,
)
from google.cloud.bigtable_v2.types import ReadRowsResponse as ReadRowsResponsePB

from bigtable_rows._helpers import DATA_SCOPE
from bigtable_rows._helpers import DEFAULT_API_ENDPOINT
from bigtable_rows._helpers import DEFAULT_APP_PROFILE_ID
from bigtable_rows._helpers import _table_path
from bigtable_rows.exceptions import BigtableError
from bigtable_rows.exceptions import ClientInitializationError
from bigtable_rows.mutations import MutateRowsInput
from bigtable_rows.read_rows_query import ReadRowsInput
from bigtable_rows.row import ReadRowsOutput

_LOGGER = logging.getLogger(__name__)


class Bigtable(abc.ABC):
    """
    Row-level operations against a Bigtable table

    Callers depend on this interface rather than on a concrete transport.
    Each call uses the handle for its whole duration and carries a single
    logical request.
    """

    @abc.abstractmethod
    async def mutate_row(self, input: MutateRowsInput) -> None:
        """
        Write every cell described by ``input``

        Raises:
          - BigtableError if the request is rejected or the transport fails
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def read_rows(self, input: ReadRowsInput) -> ReadRowsOutput:
        """
        Read the row identified by ``input``

        Raises:
          - BigtableError if the request is rejected or the transport fails
        """
        raise NotImplementedError


class BigtableClient(Bigtable):
    """
    Bigtable implementation backed by the Bigtable v2 gRPC API

    Create with :meth:`create` inside a running event loop. A single instance
    is meant to be shared by every request handler of the process.
    """

    def __init__(
        self,
        gapic_client: BigtableAsyncClient,
        *,
        project: str | None = None,
        instance_id: str | None = None,
        app_profile_id: str = DEFAULT_APP_PROFILE_ID,
    ):
        """
        Wrap an existing GAPIC client

        Args:
            gapic_client: the BigtableAsyncClient used to send requests
            project: project used to expand bare table ids
            instance_id: instance used to expand bare table ids
            app_profile_id: the app profile attached to every request
        """
        self._gapic_client = gapic_client
        self.project = project
        self.instance_id = instance_id
        self.app_profile_id = app_profile_id

    @classmethod
    async def create(
        cls,
        *,
        project: str | None = None,
        instance_id: str | None = None,
        app_profile_id: str = DEFAULT_APP_PROFILE_ID,
        credentials: google.auth.credentials.Credentials | None = None,
        api_endpoint: str = DEFAULT_API_ENDPOINT,
    ) -> BigtableClient:
        """
        Connect to the Bigtable data API

        Uses Application Default Credentials unless ``credentials`` is given.
        If the BIGTABLE_EMULATOR_HOST environment variable is set, connects
        to the emulator over an insecure channel instead.

        Raises:
          - ClientInitializationError if credentials or the channel could not
            be set up
        """
        emulator_host = os.getenv(BIGTABLE_EMULATOR)
        try:
            if emulator_host is not None:
                _LOGGER.info("connecting to bigtable emulator at %s", emulator_host)
                transport = BigtableGrpcAsyncIOTransport(
                    host=emulator_host,
                    channel=aio.insecure_channel(emulator_host),
                )
                gapic_client = BigtableAsyncClient(transport=transport)
            else:
                if credentials is None:
                    credentials, _ = google.auth.default(scopes=[DATA_SCOPE])
                gapic_client = BigtableAsyncClient(
                    credentials=credentials,
                    client_options=client_options_lib.ClientOptions(
                        api_endpoint=api_endpoint
                    ),
                )
        except (auth_exceptions.GoogleAuthError, core_exceptions.GoogleAPIError) as exc:
            raise ClientInitializationError._from_cause(
                "initialize bigtable client", exc
            ) from exc
        return cls(
            gapic_client,
            project=project,
            instance_id=instance_id,
            app_profile_id=app_profile_id,
        )

    def _resolve_table(self, table_name: str) -> str:
        return _table_path(table_name, self.project, self.instance_id)

    async def mutate_row(self, input: MutateRowsInput) -> None:
        """
        Apply all entries of ``input`` in a single MutateRows request

        Every cell is written with a server-assigned timestamp. The response
        stream is consumed to completion, but the per-entry statuses it
        carries are not inspected.

        Raises:
          - BigtableError if the rpc fails
        """
        request = input._to_pb(
            self._resolve_table(input.table_name), self.app_profile_id
        )
        try:
            result_generator = await self._gapic_client.mutate_rows(
                request=request, retry=None
            )
            async for _ in result_generator:
                pass
        except core_exceptions.GoogleAPIError as exc:
            raise BigtableError._from_cause("mutate rows", exc) from exc

    async def read_rows(self, input: ReadRowsInput) -> ReadRowsOutput:
        """
        Read the row identified by ``input``

        Only the first message of the response stream is decoded.

        Raises:
          - BigtableError if the rpc fails or the response can't be read
        """
        request = input._to_pb(
            self._resolve_table(input.table_name), self.app_profile_id
        )
        try:
            stream = await self._gapic_client.read_rows(request=request, retry=None)
        except core_exceptions.GoogleAPIError as exc:
            raise BigtableError._from_cause("read rows", exc) from exc
        response: ReadRowsResponsePB | None = None
        try:
            async for response in stream:
                break
        except core_exceptions.GoogleAPIError as exc:
            raise BigtableError._from_cause("read response", exc) from exc
        finally:
            # the rest of the stream is never read
            stream.cancel()
        return ReadRowsOutput._from_pb(response)

    async def close(self) -> None:
        """Close the underlying transport"""
        await self._gapic_client.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
