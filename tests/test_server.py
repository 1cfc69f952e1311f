import pytest

from fastapi.testclient import TestClient

from othello.config import Settings
from othello.game import Board, Cell
from othello.server import create_app

B, W = int(Cell.BLACK), int(Cell.WHITE)


def make_client(**kwargs):
    return TestClient(create_app(Settings(**kwargs)))


def opening():
    return {"turn": B, "board": Board.initial().to_list()}


def test_legal_moves():
    client = make_client()
    response = client.post("/legal-moves", json=opening())
    assert response.status_code == 200
    assert response.json() == {
        "moves": [[2, 3], [3, 2], [4, 5], [5, 4]],
        "game_over": False,
    }


def test_score():
    client = make_client()
    body = {"turn": W, "board": Board.initial().apply_move(2, 3, Cell.BLACK).to_list()}
    response = client.post("/score", json=body)
    assert response.json() == {"score": -3, "black": 4, "white": 1}


def test_best_move_uses_default_depth():
    client = make_client(depth=1)
    response = client.post("/best-move", json=opening())
    assert response.status_code == 200
    data = response.json()
    assert data["move"] == [2, 3]
    assert data["index"] == 19
    assert data["score"] == 3
    assert data["depth"] == 1
    assert len(data["candidates"]) == 4


def test_best_move_without_moves():
    client = make_client()
    board = [[B] * 8 for _ in range(8)]
    board[0][0] = -1
    response = client.post("/best-move", json={"turn": W, "board": board, "depth": 2})
    assert response.status_code == 200
    assert response.json()["move"] is None
    assert response.json()["candidates"] == []


def test_invalid_position_is_rejected():
    client = make_client()
    bad_board = {"turn": B, "board": [[-1] * 8] * 7}
    assert client.post("/best-move", json=bad_board).status_code == 400
    bad_turn = {"turn": 5, "board": Board.initial().to_list()}
    assert client.post("/score", json=bad_turn).status_code == 400
    bad_cell = opening()
    bad_cell["board"][0][0] = 3
    assert client.post("/legal-moves", json=bad_cell).status_code == 400


def test_depth_limits():
    client = make_client(depth=1, max_depth=3)
    for depth in (0, 4):
        body = dict(opening(), depth=depth)
        response = client.post("/best-move", json=body)
        assert response.status_code == 400
        assert "depth" in response.json()["detail"]


def test_simulate_full_board():
    client = make_client()
    board = [[B] * 8 for _ in range(8)]
    board[0][0] = -1
    response = client.post("/simulate", json={"turn": B, "board": board, "depth": 3})
    assert response.status_code == 200
    data = response.json()
    assert data["moves"] == [B]
    assert data["winner"] == "black"
    assert data["board"] == board


def test_simulate_tie():
    client = make_client()
    board = [[B] * 8] * 4 + [[W] * 8] * 4
    response = client.post("/simulate", json={"turn": W, "board": board})
    assert response.json()["winner"] is None
    assert response.json()["moves"] == [W]


def test_simulate_opening():
    client = make_client(depth=1)
    data = client.post("/simulate", json=opening()).json()
    assert data["moves"][0] == B
    assert len(data["moves"]) > 1
    assert data["winner"] in ("black", "white", None)


def test_get_not_allowed():
    client = make_client()
    assert client.get("/best-move").status_code == 405


def test_badly_typed_requests_are_rejected():
    client = make_client()
    board = Board.initial().to_list()
    assert client.post("/best-move", json={"turn": "black", "board": board}).status_code == 400
    assert client.post("/legal-moves", json={"turn": B, "board": [["x"] * 8] * 8}).status_code == 400
    assert client.post("/simulate", json={"turn": B, "board": board, "depth": "deep"}).status_code == 400
    response = client.post("/score", json={"board": board})
    assert response.status_code == 400
    assert response.json()["detail"]


def test_bad_environment_fails_when_app_is_built(monkeypatch):
    monkeypatch.setenv("OTHELLO_DEPTH", "deep")
    with pytest.raises(ValueError):
        create_app()
    # An explicit settings object does not read the environment.
    assert make_client(depth=2).post("/score", json=opening()).status_code == 200
