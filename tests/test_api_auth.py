"""Route tests for /register, /login and /me through the FastAPI app."""

import unittest

from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.security import hash_password
from tests.support import make_app


class TestAuthRoutes(unittest.TestCase):
    def setUp(self) -> None:
        app, self.mongo = make_app()
        self.client = self.enterContext(TestClient(app))

    def _register(self, **overrides) -> object:
        body = {"name": "A", "email": "a@x.com", "role": "customer", "password": "p1"}
        body.update(overrides)
        return self.client.post("/register", json=body)

    def test_register_then_login_scenario(self) -> None:
        response = self._register()
        self.assertEqual(response.status_code, 201)
        self.assertEqual(
            response.json(), {"success": True, "message": "User registered successfully"}
        )

        response = self.client.post("/login", json={"email": "a@x.com", "password": "p1"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "Login successful")
        self.assertTrue(body["token"])
        self.assertEqual(body["accessToken"], body["token"])

        response = self.client.post("/login", json={"email": "a@x.com", "password": "wrong"})
        self.assertEqual(response.status_code, 401)
        self.assertNotIn("token", response.json())
        self.assertNotIn("accessToken", response.json())

    def test_duplicate_registration(self) -> None:
        self.assertEqual(self._register().status_code, 201)
        response = self._register(name="Other")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(), {"success": False, "message": "User already exists"}
        )
        users = self.mongo["testShop"]["users"].docs
        self.assertEqual(len(users), 1)

    def test_register_defaults_role_to_customer(self) -> None:
        response = self.client.post(
            "/register", json={"name": "B", "email": "b@x.com", "password": "p1"}
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.mongo["testShop"]["users"].docs[0]["role"], "customer")

    def test_register_missing_fields_is_bad_request(self) -> None:
        response = self.client.post("/register", json={"email": "c@x.com"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertTrue(body["errors"])
        self.assertEqual(self.mongo["testShop"]["users"].docs, [])

    def test_register_blank_name_is_bad_request(self) -> None:
        response = self._register(name="   ")
        self.assertEqual(response.status_code, 400)

    def test_login_unknown_email(self) -> None:
        response = self.client.post("/login", json={"email": "nobody@x.com", "password": "p1"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid email or password")

    def test_login_for_user_stored_with_null_fields(self) -> None:
        self.mongo["testShop"]["users"].docs.append(
            {
                "_id": ObjectId(),
                "name": None,
                "email": "old@x.com",
                "role": None,
                "password": hash_password("p1", rounds=4),
            }
        )
        response = self.client.post("/login", json={"email": "old@x.com", "password": "p1"})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["token"])

    def test_me_requires_token(self) -> None:
        response = self.client.get("/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers.get("www-authenticate"), "Bearer")

    def test_me_rejects_garbage_token(self) -> None:
        response = self.client.get("/me", headers={"Authorization": "Bearer garbage"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid or expired token")

    def test_me_returns_token_claims(self) -> None:
        self._register(role="admin")
        token = self.client.post(
            "/login", json={"email": "a@x.com", "password": "p1"}
        ).json()["token"]
        response = self.client.get("/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["data"], {"email": "a@x.com", "role": "admin", "name": "A"}
        )


class TestRootAndHealth(unittest.TestCase):
    def test_root_status(self) -> None:
        app, _ = make_app()
        with TestClient(app) as client:
            response = client.get("/")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["statusMessage"], "Baby Care Shop Server is running very smoothly!")
        self.assertIn("timeStamp", body)

    def test_health_reports_connected(self) -> None:
        app, _ = make_app()
        with TestClient(app) as client:
            response = client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"status": "ok", "environment": "dev", "database": "connected"}
        )

    def test_api_prefix(self) -> None:
        app, _ = make_app(API_PREFIX="/api")
        with TestClient(app) as client:
            self.assertEqual(client.get("/api/health").status_code, 200)
            self.assertEqual(client.get("/health").status_code, 404)
