"""Shared fixtures for all test modules."""
import json
import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.testclient import TestClient
from starlette.datastructures import UploadFile

os.environ.setdefault("FB_FUNDRAISERS_DEBUG", "false")

from fb_fundraisers.models import CreateFundraiserParams
from fb_fundraisers.services import APIClient, LoggerFunc


class FakeGraphAPI:
    """In-process stand-in for graph.facebook.com that records every create call."""

    def __init__(self):
        self.app = FastAPI()
        self.requests: list[dict] = []
        self.images: dict[str, bytes] = {}
        self.status_code = 200
        self.body = json.dumps({"id": "1234567890"}).encode()

        @self.app.post("/v2.8/me/fundraisers")
        async def create_fundraiser(request: Request) -> Response:
            form = await request.form()
            fields, files = {}, {}
            for key, value in form.multi_items():
                if isinstance(value, UploadFile):
                    files[key] = (value.filename, await value.read())
                else:
                    fields[key] = value
            self.requests.append({"headers": dict(request.headers), "fields": fields, "files": files})
            return Response(content=self.body, status_code=self.status_code, media_type="application/json")

        @self.app.get("/images/{name}")
        async def get_image(name: str) -> Response:
            if name not in self.images:
                return Response(status_code=404)
            return Response(content=self.images[name], media_type="image/png")

    def respond_with(self, status_code: int, body=None) -> None:
        self.status_code = status_code
        if body is None:
            self.body = b""
        elif isinstance(body, bytes):
            self.body = body
        else:
            self.body = json.dumps(body).encode()


@pytest.fixture
def fake_graph():
    return FakeGraphAPI()


@pytest.fixture
def graph_http(fake_graph):
    return TestClient(fake_graph.app)


@pytest.fixture
def log_messages():
    return []


@pytest.fixture
def api_client(graph_http, log_messages):
    return APIClient(http_client=graph_http, logger=LoggerFunc(log_messages.append), debug=False)


@pytest.fixture
def end_time():
    return datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=30)


@pytest.fixture
def params(end_time):
    return CreateFundraiserParams(
        access_token="EAAB-test-token",
        charity_id="1234",
        title="Run for clean water",
        description="Every donation funds a new well.",
        goal=250000,
        currency="USD",
        end_time=end_time,
        external_id="FR-0001",
    )
