"""Integration tests for the movie resource and its permission ladder."""

from datetime import UTC, datetime, timedelta

from film_api.core.security import create_access_token
from film_api.schemas.auth import CurrentUser
from tests.support import ApiTestCase


class TestMovieReads(ApiTestCase):
    """GET /movies and GET /movies/{id} are public."""

    def test_list_empty(self) -> None:
        resp = self.client.get("/movies")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_unknown_id_is_not_found(self) -> None:
        resp = self.client.get("/movies/999")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("error", resp.json())

    def test_list_is_ordered_by_id_with_director_join(self) -> None:
        headers = self.user_headers()
        director_id = self.seed_director("Sam Raimi")
        for title, year in (("Spider-Man", 2002), ("Spider-Man 2", 2004)):
            resp = self.client.post(
                "/movies",
                json={"title": title, "director_id": director_id, "year": year},
                headers=headers,
            )
            self.assertEqual(resp.status_code, 201, resp.text)

        movies = self.client.get("/movies").json()
        self.assertEqual([m["title"] for m in movies], ["Spider-Man", "Spider-Man 2"])
        self.assertLess(movies[0]["id"], movies[1]["id"])
        self.assertTrue(all(m["director_name"] == "Sam Raimi" for m in movies))

    def test_director_fields_null_after_director_removed(self) -> None:
        admin = self.admin_headers()
        director_id = self.seed_director()
        movie = self.client.post(
            "/movies", json={"title": "LOTR", "director_id": director_id, "year": 2001}, headers=admin
        ).json()
        self.assertEqual(self.client.delete(f"/directors/{director_id}", headers=admin).status_code, 204)

        data = self.client.get(f"/movies/{movie['id']}").json()
        self.assertIsNone(data["director_id"])
        self.assertIsNone(data["director_name"])


class TestMovieCreate(ApiTestCase):
    def test_create_without_token_is_unauthorized(self) -> None:
        resp = self.client.post("/movies", json={"title": "X", "director_id": 1, "year": 2020})
        self.assertEqual(resp.status_code, 401)
        self.assertIn("error", resp.json())

    def test_create_with_invalid_token_is_forbidden(self) -> None:
        resp = self.client.post(
            "/movies",
            json={"title": "X", "director_id": 1, "year": 2020},
            headers=self.auth_headers("not-a-token"),
        )
        self.assertEqual(resp.status_code, 403)

    def test_create_then_get(self) -> None:
        headers = self.user_headers()
        director_id = self.seed_director("Peter Jackson")
        self.assertEqual(director_id, 1)

        resp = self.client.post(
            "/movies", json={"title": "X", "director_id": 1, "year": 2020}, headers=headers
        )
        self.assertEqual(resp.status_code, 201)
        created = resp.json()
        self.assertIsInstance(created["id"], int)

        fetched = self.client.get(f"/movies/{created['id']}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(
            fetched.json(),
            {
                "id": created["id"],
                "title": "X",
                "year": 2020,
                "director_id": 1,
                "director_name": "Peter Jackson",
            },
        )

    def test_missing_fields_are_bad_request(self) -> None:
        headers = self.user_headers()
        self.seed_director()
        for body in (
            {"director_id": 1, "year": 2020},
            {"title": "X", "year": 2020},
            {"title": "X", "director_id": 1},
            {"title": "  ", "director_id": 1, "year": 2020},
        ):
            with self.subTest(body=body):
                resp = self.client.post("/movies", json=body, headers=headers)
                self.assertEqual(resp.status_code, 400)

    def test_wrongly_typed_field_is_bad_request(self) -> None:
        headers = self.user_headers()
        self.seed_director()
        for body in (
            {"title": "X", "director_id": 1, "year": "soon"},
            {"title": "X", "director_id": True, "year": 2020},
            {"title": "X", "director_id": 1, "year": "2020"},
            {"title": "X", "director_id": 1, "year": 2020.5},
        ):
            with self.subTest(body=body):
                resp = self.client.post("/movies", json=body, headers=headers)
                self.assertEqual(resp.status_code, 400)
                self.assertIn("error", resp.json())
        self.assertEqual(self.client.get("/movies").json(), [])

    def test_non_positive_year_or_director_is_bad_request(self) -> None:
        headers = self.user_headers()
        self.seed_director()
        for body in (
            {"title": "X", "director_id": 1, "year": 0},
            {"title": "X", "director_id": 0, "year": 2020},
        ):
            with self.subTest(body=body):
                resp = self.client.post("/movies", json=body, headers=headers)
                self.assertEqual(resp.status_code, 400)

    def test_expired_token_is_forbidden(self) -> None:
        created = self.register("late")
        identity = CurrentUser(id=created["id"], username="late", role="user")
        issued = datetime.now(UTC) - timedelta(hours=1, seconds=5)
        token = create_access_token(identity, expires_delta=timedelta(hours=1), now=issued)
        resp = self.client.post(
            "/movies",
            json={"title": "X", "director_id": 1, "year": 2020},
            headers=self.auth_headers(token),
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "Token expired"})

    def test_non_bearer_scheme_counts_as_missing_token(self) -> None:
        resp = self.client.post(
            "/movies",
            json={"title": "X", "director_id": 1, "year": 2020},
            headers={"Authorization": "Basic abc"},
        )
        self.assertEqual(resp.status_code, 401)

    def test_unknown_director_is_bad_request(self) -> None:
        headers = self.user_headers()
        resp = self.client.post(
            "/movies", json={"title": "X", "director_id": 42, "year": 2020}, headers=headers
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get("/movies").json(), [])


class TestMovieAdminOperations(ApiTestCase):
    """PUT and DELETE require the admin role."""

    def setUp(self) -> None:
        super().setUp()
        self.director_id = self.seed_director()
        self.user = self.user_headers()
        self.admin = self.admin_headers()
        resp = self.client.post(
            "/movies",
            json={"title": "The Matrix", "director_id": self.director_id, "year": 1999},
            headers=self.user,
        )
        self.movie_id = resp.json()["id"]

    def test_update_without_token_is_unauthorized(self) -> None:
        resp = self.client.put(
            f"/movies/{self.movie_id}", json={"title": "Y", "director_id": self.director_id, "year": 2000}
        )
        self.assertEqual(resp.status_code, 401)

    def test_update_as_user_is_forbidden(self) -> None:
        resp = self.client.put(
            f"/movies/{self.movie_id}",
            json={"title": "Y", "director_id": self.director_id, "year": 2000},
            headers=self.user,
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(self.client.get(f"/movies/{self.movie_id}").json()["title"], "The Matrix")

    def test_update_as_admin(self) -> None:
        other = self.seed_director("The Wachowskis", None)
        resp = self.client.put(
            f"/movies/{self.movie_id}",
            json={"title": "The Matrix Reloaded", "director_id": other, "year": 2003},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["title"], "The Matrix Reloaded")
        self.assertEqual(data["year"], 2003)
        self.assertEqual(data["director_name"], "The Wachowskis")

    def test_update_unknown_movie_is_not_found(self) -> None:
        resp = self.client.put(
            "/movies/999",
            json={"title": "Y", "director_id": self.director_id, "year": 2000},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 404)

    def test_delete_without_token_is_unauthorized(self) -> None:
        resp = self.client.delete(f"/movies/{self.movie_id}")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(self.client.get(f"/movies/{self.movie_id}").status_code, 200)

    def test_delete_as_user_is_forbidden(self) -> None:
        resp = self.client.delete(f"/movies/{self.movie_id}", headers=self.user)
        self.assertEqual(resp.status_code, 403)

    def test_delete_twice(self) -> None:
        first = self.client.delete(f"/movies/{self.movie_id}", headers=self.admin)
        self.assertEqual(first.status_code, 204)
        self.assertEqual(first.content, b"")
        second = self.client.delete(f"/movies/{self.movie_id}", headers=self.admin)
        self.assertEqual(second.status_code, 404)
        self.assertEqual(self.client.get(f"/movies/{self.movie_id}").status_code, 404)
