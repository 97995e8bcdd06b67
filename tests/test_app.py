import unittest

from gridmaze.app import create_app


class AppTests(unittest.TestCase):
    def setUp(self) -> None:
        self.app = create_app()
        self.app.config["TESTING"] = True
        self.client = self.app.test_client()

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok"})

    def test_generate_then_solve(self) -> None:
        response = self.client.post(
            "/generate",
            json={"width": 11, "height": 11, "difficulty": "Easy", "start": {"x": 0, "y": 0}, "end": {"x": 10, "y": 10}},
        )
        self.assertEqual(response.status_code, 200)
        maze = response.get_json()
        self.assertEqual(len(maze["grid"]), 11)

        solved = self.client.post("/solve", json={"grid": maze["grid"], "start": maze["start"], "end": maze["end"]})
        self.assertEqual(solved.status_code, 200)
        path = solved.get_json()["path"]
        self.assertEqual(path[0], {"x": 10, "y": 10})
        self.assertEqual(path[-1], {"x": 0, "y": 0})

        verified = self.client.post("/verify", json=dict(maze, path=path))
        self.assertEqual(verified.status_code, 200)
        self.assertTrue(verified.get_json()["is_shortest"])

    def test_unsolvable_grid_returns_null_path(self) -> None:
        response = self.client.post(
            "/solve",
            json={"grid": [[0, 1, 0]], "start": {"x": 0, "y": 0}, "end": {"x": 2, "y": 0}},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.get_json()["path"])

    def test_invalid_difficulty_is_a_bad_request(self) -> None:
        response = self.client.post("/generate", json={"difficulty": "Extreme"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "invalid_difficulty")

    def test_oversized_maze_is_a_bad_request(self) -> None:
        response = self.client.post("/generate", json={"difficulty": "Easy", "width": 1000000, "height": 1000000})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "invalid_dimensions")

    def test_malformed_grid_is_a_bad_request(self) -> None:
        response = self.client.post(
            "/solve",
            json={"grid": [[0, 3]], "start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 0}},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "malformed_grid")

    def test_non_json_body_is_a_bad_request(self) -> None:
        response = self.client.post("/solve", data="not json", content_type="text/plain")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "invalid_request")

    def test_cors_headers_present(self) -> None:
        response = self.client.post(
            "/generate",
            json={"difficulty": "Medium"},
            headers={"Origin": "http://localhost:5173"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("Access-Control-Allow-Origin", response.headers)


if __name__ == "__main__":
    unittest.main()
