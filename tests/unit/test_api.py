# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from httpsclient import api
from httpsclient.config import ClientSettings
from httpsclient.http.adapters import StubTransport, make_raw_result
from httpsclient.http.client import Client
from httpsclient.http.transport import HttpxTransport


@pytest.fixture
def stub():
    transport = StubTransport()
    api.set_default_client(Client(ClientSettings(user_agent="UA/1.0"), transport=transport))
    yield transport
    api.reset_default_client()


def test_facade_setters_configure_shared_client(stub):
    assert api.default_headers({"X-App": "demo"}) == {"x-app": "demo"}
    assert api.timeout(2) == 2
    assert api.verify_peer(False) is False
    client = api.get_default_client()
    assert client.config.headers == {"x-app": "demo"}
    assert client.config.timeout == 2
    assert client.config.verify_peer is False


def test_facade_verbs_use_shared_configuration(stub):
    stub.add("http://x/items", make_raw_result(201, [("Content-Type", "application/json")], {"id": 7}))
    api.default_header("X-App", "demo")

    resp = api.post("http://x/items", body={"name": "a"})

    assert resp.status_code == 201
    assert resp.body == {"id": 7}
    sent = stub.requests[0]
    assert sent.method == "POST"
    assert ("x-app", "demo") in sent.headers
    assert sent.content == b"name=a"


def test_reset_default_client_builds_fresh_client(stub):
    api.default_header("X-App", "demo")
    api.reset_default_client()
    fresh = api.get_default_client()
    assert fresh.config.headers == {}
    assert isinstance(fresh.transport, HttpxTransport)
    assert api.get_default_client() is fresh
