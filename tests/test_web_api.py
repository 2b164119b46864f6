"""
/tests/test_web_api.py

Web API 测试（Flask test client）
"""
import sys
import os
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from interface import Settings
from interface.web_api import DatabaseWebAPI


@pytest.fixture
def client():
    with tempfile.TemporaryDirectory() as tmp_dir:
        api = DatabaseWebAPI(Settings(data_dir=tmp_dir, log_dir=os.path.join(tmp_dir, "logs")))
        api.app.config["TESTING"] = True
        yield api.app.test_client()
        api.db.close()


def execute(client, sql):
    return client.post("/api/sql/execute", json={"sql": sql})


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_execute_round_trip(client):
    resp = execute(client, "CREATE TABLE t (a, b);")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Created table t"

    assert execute(client, "INSERT INTO t (a, b) VALUES (1, 2);").status_code == 200

    body = execute(client, "SELECT b FROM t;").get_json()
    assert body["columns"] == ["b"]
    assert body["data"] == [["2"]]
    assert body["lines"] == [" 2 |"]


def test_execute_reports_errors(client):
    resp = execute(client, "DROP TABLE nope;")
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["error_type"] == "NotFound"

    body = execute(client, "DROP TABLE ;").get_json()
    assert body["error_type"] == "SyntaxError"
    assert body["code"] == "IDENTIFIER"


def test_execute_rejects_bad_requests(client):
    assert client.post("/api/sql/execute", data="not json").status_code == 400
    assert client.post("/api/sql/execute", json={"sql": "   "}).status_code == 400
    assert client.post("/api/sql/execute", json={"query": "x"}).status_code == 400


def test_tables_endpoints(client):
    execute(client, "CREATE TABLE t (a, b);")
    execute(client, "INSERT INTO t (a, b) VALUES (1, 2);")

    body = client.get("/api/tables").get_json()
    assert body["data"] == ["t"]

    body = client.get("/api/tables/t/data").get_json()
    assert body["data"] == {"table": "t", "columns": ["a", "b"], "rows": [["1", "2"]]}

    assert client.get("/api/tables/missing/data").status_code == 404


def test_lookups_do_not_accumulate_table_locks():
    with tempfile.TemporaryDirectory() as tmp_dir:
        api = DatabaseWebAPI(Settings(data_dir=tmp_dir, log_dir=os.path.join(tmp_dir, "logs")))
        client = api.app.test_client()
        for i in range(500):
            assert client.get(f"/api/tables/nosuch{i}/data").status_code == 404
        execute(client, "CREATE TABLE t (a);")
        execute(client, "DROP TABLE t;")
        assert len(api.db.lock_manager) == 0
        api.db.close()
