"""Tests for /api/children routes."""

import unittest

from fastapi.testclient import TestClient

from adapter.fake.child_repository import FakeChildRepository
from adapter.fake.user_repository import FakeUserRepository
from api.dependencies import get_child_repo, get_user_repo
from api.main import app


class TestChildrenRoutes(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.users = FakeUserRepository()
        self.children = FakeChildRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.users
        app.dependency_overrides[get_child_repo] = lambda: self.children

        self.parent = self._headers_for("parent@x.com")
        self.other = self._headers_for("other@x.com")

    def tearDown(self):
        app.dependency_overrides.clear()

    def _headers_for(self, email: str) -> dict:
        response = self.client.post(
            "/api/users/register",
            json={"name": "Parent", "email": email, "password": "p12345"},
        )
        return {"Authorization": f"Bearer {response.json()['token']}"}

    def _create(self, headers=None, **body) -> dict:
        payload = {"name": "Mia", **body}
        response = self.client.post("/api/children", json=payload, headers=headers or self.parent)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_create_and_get_child(self):
        created = self._create(birthDate="2020-05-01", notes="loves trains")

        self.assertEqual(created["name"], "Mia")
        self.assertEqual(created["birthDate"], "2020-05-01")
        self.assertIn("createdAt", created)

        response = self.client.get(f"/api/children/{created['id']}", headers=self.parent)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["notes"], "loves trains")

    def test_list_only_own_children(self):
        self._create(name="Mia")
        self._create(name="Leo")
        self._create(headers=self.other, name="Ada")

        response = self.client.get("/api/children", headers=self.parent)

        self.assertEqual(response.status_code, 200)
        self.assertEqual({c["name"] for c in response.json()}, {"Mia", "Leo"})

    def test_other_parent_is_forbidden(self):
        created = self._create()

        response = self.client.get(f"/api/children/{created['id']}", headers=self.other)

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["code"], "FORBIDDEN")

    def test_unknown_child(self):
        response = self.client.get("/api/children/missing", headers=self.parent)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["code"], "CHILD_NOT_FOUND")

    def test_update_child(self):
        created = self._create()

        response = self.client.patch(
            f"/api/children/{created['id']}",
            json={"notes": "nap at 1pm", "birthDate": "2020-06-01"},
            headers=self.parent,
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["notes"], "nap at 1pm")
        self.assertEqual(response.json()["birthDate"], "2020-06-01")
        self.assertEqual(response.json()["name"], "Mia")

    def test_update_rejects_unknown_fields(self):
        created = self._create()
        response = self.client.patch(
            f"/api/children/{created['id']}",
            json={"parentId": "someone-else"},
            headers=self.parent,
        )
        self.assertEqual(response.status_code, 400)

    def test_delete_child(self):
        created = self._create()

        response = self.client.delete(f"/api/children/{created['id']}", headers=self.parent)

        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.children.store, {})

    def test_children_require_auth(self):
        self.assertEqual(self.client.get("/api/children").status_code, 401)
        self.assertEqual(self.client.post("/api/children", json={"name": "Mia"}).status_code, 401)


if __name__ == '__main__':
    unittest.main()
