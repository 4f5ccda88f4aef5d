"""Tests for the role lookup table and role routes."""

import unittest

from support import API, ApiTestCase

from storefront.models import Role
from storefront.schemas.role import RoleName
from storefront.services.roles import ensure_default_roles


class TestEnsureDefaultRoles(ApiTestCase):
    def test_seeded_once(self) -> None:
        with self.SessionTesting() as db:
            names = sorted(r.name for r in db.query(Role).all())
            self.assertEqual(names, ["admin", "user"])
            self.assertEqual(ensure_default_roles(db), 0)
        self.assertEqual(self.count(Role), 2)

    def test_restores_missing_role(self) -> None:
        with self.SessionTesting() as db:
            db.query(Role).filter(Role.name == "admin").delete()
            db.commit()
            self.assertEqual(ensure_default_roles(db), 1)
        self.assertEqual(self.count(Role), 2)


class TestRoleName(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertIs(RoleName.parse("admin"), RoleName.ADMIN)
        self.assertIsNone(RoleName.parse("root"))
        self.assertIsNone(RoleName.parse(None))


class TestRoleRoutes(ApiTestCase):
    def test_list_and_get_are_public(self) -> None:
        listing = self.client.get(f"{API}/role")
        self.assertEqual(listing.status_code, 200)
        role_id = listing.json()[0]["id"]
        self.assertEqual(self.client.get(f"{API}/role/{role_id}").status_code, 200)
        self.assertEqual(self.client.get(f"{API}/role/999").status_code, 404)
        self.assertEqual(self.client.get(f"{API}/role/x").status_code, 404)

    def test_create_duplicate_is_400(self) -> None:
        admin = self.create_admin()
        response = self.client.post(
            f"{API}/role", json={"name": "user"}, headers=self.auth(admin)
        )
        self.assertEqual(response.status_code, 400)

    def test_create_unknown_name_is_400(self) -> None:
        admin = self.create_admin()
        response = self.client.post(
            f"{API}/role", json={"name": "superuser"}, headers=self.auth(admin)
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["errors"][0]["field"], "name")

    def test_mutations_require_admin(self) -> None:
        alice = self.create_user()
        response = self.client.post(
            f"{API}/role", json={"name": "admin"}, headers=self.auth(alice)
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.client.delete(f"{API}/role/1").status_code, 401)

    def test_delete_role_in_use_is_refused(self) -> None:
        admin = self.create_admin()
        with self.SessionTesting() as db:
            admin_role_id = db.query(Role).filter(Role.name == "admin").one().id
            user_role_id = db.query(Role).filter(Role.name == "user").one().id

        in_use = self.client.delete(f"{API}/role/{admin_role_id}", headers=self.auth(admin))
        self.assertEqual(in_use.status_code, 400)

        unused = self.client.delete(f"{API}/role/{user_role_id}", headers=self.auth(admin))
        self.assertEqual(unused.status_code, 200)
        self.assertEqual(self.count(Role), 1)

        recreated = self.client.post(
            f"{API}/role", json={"name": "user"}, headers=self.auth(admin)
        )
        self.assertEqual(recreated.status_code, 201)
        self.assertEqual(recreated.json()["name"], "user")

    def test_rename_to_existing_name_is_400(self) -> None:
        admin = self.create_admin()
        with self.SessionTesting() as db:
            user_role_id = db.query(Role).filter(Role.name == "user").one().id
        response = self.client.put(
            f"{API}/role/{user_role_id}", json={"name": "admin"}, headers=self.auth(admin)
        )
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
