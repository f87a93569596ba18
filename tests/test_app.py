import pytest

from main import app


@pytest.fixture
def client():
    app.config.update(TESTING=True)
    with app.test_client() as client:
        yield client


def new_maze(client, size=4, seed=42):
    client.post("/api/config/size", json={"size": size})
    return client.post("/api/maze/generate", json={"seed": seed}).get_json()


class TestPages:
    def test_index(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert b"Maze Algorithm Visualizer" in res.data
        assert b"<svg" in res.data

    def test_state(self, client):
        data = client.get("/api/state").get_json()
        assert data["state"]["size"] == 5
        assert data["state"]["phase"] == "generate"
        assert data["step"]["kind"] == "visit"
        assert data["svg"].startswith("<svg")
        assert "frontier" in data["panels"]


class TestConfig:
    def test_generate_with_seed_is_repeatable(self, client):
        a = new_maze(client)
        b = new_maze(client)
        assert a["state"]["seed"] == 42
        assert a["svg"] == b["svg"]

    def test_size(self, client):
        data = client.post("/api/config/size", json={"size": 3}).get_json()
        assert data["state"]["size"] == 3

    @pytest.mark.parametrize("payload", [{"size": 12}, {"size": "big"}, {}])
    def test_bad_size(self, client, payload):
        res = client.post("/api/config/size", json=payload)
        assert res.status_code == 400
        assert "error" in res.get_json()

    def test_bad_algorithm(self, client):
        res = client.post("/api/config/algo", json={"algo_key": "dfs"})
        assert res.status_code == 400

    def test_bad_phase(self, client):
        assert client.post("/api/phase", json={"phase": "draw"}).status_code == 400

    def test_speed(self, client):
        data = client.post("/api/config/speed", json={"speed": "slow"}).get_json()
        assert data["state"]["playback"]["speed"] == 1.0
        assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400


class TestStepping:
    def test_next_and_prev(self, client):
        new_maze(client)
        data = client.post("/api/step/next").get_json()
        assert data["state"]["playback"]["index"] == 1
        assert data["step"]["kind"] == "move"
        data = client.post("/api/step/prev").get_json()
        assert data["state"]["playback"]["index"] == 0

    def test_prev_at_start_rejected(self, client):
        new_maze(client)
        assert client.post("/api/step/prev").status_code == 400

    def test_goto(self, client):
        new_maze(client)
        data = client.post("/api/step/goto", json={"index": 2}).get_json()
        assert data["state"]["playback"]["index"] == 2
        assert client.post("/api/step/goto", json={"index": 10_000}).status_code == 400

    def test_goto_end_then_next_rejected(self, client):
        new_maze(client)
        data = client.post("/api/step/goto", json={"index": "end"}).get_json()
        assert data["step"]["kind"] == "complete"
        assert client.post("/api/step/next").status_code == 400

    def test_play_and_tick(self, client):
        new_maze(client)
        data = client.post("/api/step/play").get_json()
        assert data["state"]["playback"]["state"] == "playing"
        data = client.post("/api/step/tick").get_json()
        assert data["state"]["playback"]["index"] == 1
        data = client.post("/api/step/play").get_json()
        assert data["state"]["playback"]["state"] == "paused"


class TestSolving:
    def test_solve_to_end(self, client):
        new_maze(client)
        client.post("/api/config/algo", json={"algo_key": "astar"})
        data = client.post("/api/phase", json={"phase": "solve"}).get_json()
        assert data["step"]["kind"] == "start"
        data = client.post("/api/step/goto", json={"index": "end"}).get_json()
        assert data["step"]["kind"] == "found"
        assert data["step"]["path"][0] == [0, 0]
        assert data["step"]["path"][-1] == [3, 3]
        assert "Path found!" in data["panels"]["banner"]
        assert "Cells Explored" in data["panels"]["analytics"]

    def test_scores_toggle(self, client):
        new_maze(client)
        client.post("/api/config/algo", json={"algo_key": "astar"})
        client.post("/api/phase", json={"phase": "solve"})
        client.post("/api/step/goto", json={"index": "end"})
        data = client.post("/api/config/scores", json={"show": True}).get_json()
        assert 'class="score"' in data["svg"]

    def test_compare(self, client):
        new_maze(client)
        data = client.get("/api/compare").get_json()
        assert [r["algo_key"] for r in data["results"]] == ["bfs", "astar", "dijkstra"]
        assert len({r["path_length"] for r in data["results"]}) == 1
        assert "👑" in data["comparison"]
