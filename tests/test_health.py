"""Tests for the health and root endpoints."""

import unittest

from support import API, ApiTestCase

from storefront.models import Role


class TestHealth(ApiTestCase):
    def test_ok_with_seeded_roles(self) -> None:
        response = self.client.get(f"{API}/health")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["database"], "connected")
        self.assertEqual(sorted(data["roles"]), ["admin", "user"])

    def test_degraded_when_a_role_is_missing(self) -> None:
        with self.SessionTesting() as db:
            db.query(Role).filter(Role.name == "admin").delete()
            db.commit()
        self.assertEqual(self.client.get(f"{API}/health").json()["status"], "degraded")

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "Storefront API"})


if __name__ == "__main__":
    unittest.main()
