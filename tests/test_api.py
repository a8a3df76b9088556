# tests/test_api.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app

from conftest import CLASSIC, CLASSIC_SOLUTION

client = TestClient(app)


def test_api_solve():
    r = client.post("/solve", json={"cells": CLASSIC})
    assert r.status_code == 200
    body = r.json()
    assert body["result"] == "solved"
    assert body["cells"] == CLASSIC_SOLUTION
    assert body["solved"] and body["valid"]


def test_api_solve_unsolvable():
    cells = [0] * 81
    cells[:9] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    cells[17] = 9
    body = client.post("/solve", json={"cells": cells}).json()
    assert body["result"] == "unsolvable"
    assert body["solved"] is False


def test_api_solve_bad_length():
    r = client.post("/solve", json={"cells": [0] * 10})
    assert r.status_code == 422


def test_api_solve_bad_block_side():
    r = client.post("/solve", json={"cells": [0] * 81, "block_side": 9})
    assert r.status_code == 422


def test_api_is_allowed():
    assert client.post("/is_allowed", json={"cells": CLASSIC, "value": 4, "pos": 2}).json() == {"allowed": True}
    assert client.post("/is_allowed", json={"cells": CLASSIC, "value": 5, "pos": 2}).json() == {"allowed": False}
    assert client.post("/is_allowed", json={"cells": CLASSIC, "value": 1, "pos": 81}).status_code == 422


def test_api_sanity_check():
    cells = [0] * 81
    cells[0] = cells[80] = 7
    assert client.post("/sanity_check", json={"cells": cells}).json() == {"ok": True, "issues": []}
    cells[4] = 7
    body = client.post("/sanity_check", json={"cells": cells}).json()
    assert body["ok"] is False
    assert body["issues"] == [{"unit": "r1", "digits": [7], "cells": ["r1c1", "r1c5"]}]


def test_api_solve_duplicate_givens():
    cells = [0] * 81
    cells[:9] = [1, 1, 2, 3, 4, 5, 6, 7, 8]
    body = client.post("/solve", json={"cells": cells}).json()
    assert body["result"] == "unsolvable"
    assert body["valid"] is False
    assert body["stats"] == {"assignments": 0, "rollbacks": 0}
