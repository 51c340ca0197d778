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
HTTP front end exposing row writes and reads.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status

from bigtable_rows.client import Bigtable
from bigtable_rows.client import BigtableClient
from bigtable_rows.config import Settings
from bigtable_rows.exceptions import BigtableError
from bigtable_rows.log import configure_logging
from bigtable_rows.mutations import MutateRowsInput
from bigtable_rows.read_rows_query import ReadRowsInput

_LOGGER = logging.getLogger(__name__)

METRICS_TABLE = "metrics"

router = APIRouter()


def get_bigtable(request: Request) -> Bigtable:
    """Return the Bigtable handle shared by all handlers"""
    return request.app.state.bigtable


@router.post("/mutate_rows")
async def mutate_rows(bigtable: Bigtable = Depends(get_bigtable)) -> Response:
    try:
        await bigtable.mutate_row(
            MutateRowsInput(
                table_name=METRICS_TABLE,
                row_key="#".join(("device_id", "cpu_usage", "")),
                entries=[],
            )
        )
    except BigtableError as exc:
        _LOGGER.error("failed to mutate rows: %s", exc)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/read_rows")
async def read_rows(bigtable: Bigtable = Depends(get_bigtable)) -> Response:
    try:
        output = await bigtable.read_rows(
            ReadRowsInput(table_name=METRICS_TABLE, row_key="device_id#cpu_usage")
        )
        _LOGGER.debug("read %d cells", len(output.entries))
    except BigtableError as exc:
        _LOGGER.error("failed to read rows: %s", exc)
    return Response(status_code=status.HTTP_200_OK)


def get_app(
    bigtable: Bigtable | None = None, settings: Settings | None = None
) -> FastAPI:
    """
    Build the HTTP application

    Args:
      - bigtable: handle injected into every handler. If None, a
            BigtableClient is created at startup and closed at shutdown
      - settings: used to create the client. Defaults to the environment
    """
    if settings is None:
        settings = Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if bigtable is not None:
            yield
            return
        client = await BigtableClient.create(
            project=settings.project,
            instance_id=settings.instance_id,
            app_profile_id=settings.app_profile_id,
            api_endpoint=settings.api_endpoint,
        )
        app.state.bigtable = client
        try:
            yield
        finally:
            await client.close()

    app = FastAPI(lifespan=lifespan)
    if bigtable is not None:
        app.state.bigtable = bigtable
    app.include_router(router)
    return app


def main() -> None:
    """Serve the application on the port given by the PORT variable"""
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    port = settings.bind_port
    _LOGGER.info("listening on port %d", port)
    uvicorn.run(get_app(settings=settings), host="0.0.0.0", port=port, log_config=None)
