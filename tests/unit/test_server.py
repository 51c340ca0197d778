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

import logging

import pytest

from unittest import mock
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from google.api_core import exceptions as core_exceptions

from bigtable_rows.config import Settings
from bigtable_rows.server import get_app
from bigtable_rows.testing import FakeBigtable


@pytest.fixture
def fake():
    return FakeBigtable()


@pytest.fixture
def http_client(fake):
    with TestClient(get_app(bigtable=fake, settings=Settings())) as client:
        yield client


class TestRoutes:
    def test_mutate_rows(self, http_client, fake):
        response = http_client.post("/mutate_rows")
        assert response.status_code == 200
        assert response.content == b""
        assert len(fake.mutate_row_calls) == 1
        call = fake.mutate_row_calls[0]
        assert call.table_name == "metrics"
        assert call.row_key == "device_id#cpu_usage#"
        assert call.entries == []

    def test_mutate_rows_failure(self, http_client, fake, caplog):
        """failures are logged, the response is still 200"""
        fake.fail_with = core_exceptions.ServiceUnavailable("backend down")
        with caplog.at_level(logging.ERROR, logger="bigtable_rows.server"):
            response = http_client.post("/mutate_rows")
        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records]
        assert any(
            m.startswith("failed to mutate rows") and "backend down" in m
            for m in messages
        )

    def test_read_rows(self, http_client, fake):
        response = http_client.get("/read_rows")
        assert response.status_code == 200
        assert response.content == b""
        assert len(fake.read_rows_calls) == 1
        call = fake.read_rows_calls[0]
        assert call.table_name == "metrics"
        assert call.row_key == "device_id#cpu_usage"

    def test_read_rows_failure(self, http_client, fake, caplog):
        fake.fail_with = core_exceptions.NotFound("no such table")
        with caplog.at_level(logging.ERROR, logger="bigtable_rows.server"):
            response = http_client.get("/read_rows")
        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records]
        assert any(
            m.startswith("failed to read rows") and "no such table" in m
            for m in messages
        )

    @pytest.mark.parametrize(
        "method,path", [("get", "/mutate_rows"), ("post", "/read_rows")]
    )
    def test_wrong_method(self, http_client, method, path):
        response = getattr(http_client, method)(path)
        assert response.status_code == 405

    def test_independent_apps(self):
        """each app uses only the handle injected into it"""
        first, second = FakeBigtable(), FakeBigtable()
        with TestClient(get_app(bigtable=first, settings=Settings())) as client:
            client.post("/mutate_rows")
        with TestClient(get_app(bigtable=second, settings=Settings())) as client:
            client.get("/read_rows")
        assert len(first.mutate_row_calls) == 1
        assert first.read_rows_calls == []
        assert second.mutate_row_calls == []
        assert len(second.read_rows_calls) == 1


class TestLifespan:
    def test_creates_client_at_startup(self):
        settings = Settings(
            project="proj",
            instance_id="inst",
            app_profile_id="profile",
            api_endpoint="localhost:1234",
        )
        created = FakeBigtable()
        created.close = AsyncMock()
        with mock.patch(
            "bigtable_rows.server.BigtableClient.create",
            AsyncMock(return_value=created),
        ) as create_mock:
            app = get_app(settings=settings)
            with TestClient(app) as client:
                create_mock.assert_awaited_once_with(
                    project="proj",
                    instance_id="inst",
                    app_profile_id="profile",
                    api_endpoint="localhost:1234",
                )
                assert app.state.bigtable is created
                client.get("/read_rows")
                assert created.close.await_count == 0
        assert len(created.read_rows_calls) == 1
        assert created.close.await_count == 1

    def test_startup_failure(self):
        from bigtable_rows.exceptions import ClientInitializationError

        error = ClientInitializationError("failed to initialize bigtable client: no creds")
        with mock.patch(
            "bigtable_rows.server.BigtableClient.create", AsyncMock(side_effect=error)
        ):
            app = get_app(settings=Settings())
            with pytest.raises(ClientInitializationError):
                with TestClient(app):
                    pass


class TestMain:
    def test_main(self, monkeypatch):
        from bigtable_rows import server

        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        with mock.patch.object(server, "configure_logging") as logging_mock:
            with mock.patch("uvicorn.run") as run_mock:
                server.main()
        logging_mock.assert_called_once_with("warning")
        assert run_mock.call_count == 1
        kwargs = run_mock.call_args.kwargs
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080

    def test_main_without_port(self, monkeypatch):
        from bigtable_rows import server

        monkeypatch.delenv("PORT", raising=False)
        with mock.patch.object(server, "configure_logging"):
            with mock.patch("uvicorn.run") as run_mock:
                with pytest.raises(ValueError) as e:
                    server.main()
        assert str(e.value).startswith("failed to bind port")
        assert run_mock.call_count == 0
