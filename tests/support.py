"""Shared test case: FastAPI TestClient over a fresh in-memory SQLite database."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.database import get_db
from storefront.core.security import create_access_token
from storefront.main import app
from storefront.models import Base, Category, Product, User
from storefront.schemas.auth import RegisterRequest
from storefront.services.roles import ensure_default_roles
from storefront.services.users import register

API = "/api"


class ApiTestCase(unittest.TestCase):
    """Each test gets its own database, seeded with the built-in roles."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionTesting = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False
        )
        with self.SessionTesting() as db:
            ensure_default_roles(db)

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def create_user(
        self,
        username: str = "alice",
        email: str = "alice@example.com",
        password: str = "alice-pass",
        role: str = "user",
    ) -> int:
        """Persist a user through the service layer and return its id."""
        with self.SessionTesting() as db:
            user = register(
                db,
                RegisterRequest(username=username, email=email, password=password, role=role),
            )
            return user.id

    def create_admin(self) -> int:
        return self.create_user("root", "root@example.com", "root-pass", "admin")

    def token_for(self, user_id: int) -> str:
        with self.SessionTesting() as db:
            user = db.get(User, user_id)
            return create_access_token(user.id, user.email, user.role.name)

    def auth(self, user_id: int) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token_for(user_id)}"}

    def count(self, model: type) -> int:
        with self.SessionTesting() as db:
            return db.query(model).count()

    def add_category(self, name: str = "Tools", description: str | None = None) -> int:
        with self.SessionTesting() as db:
            category = Category(
                name=name,
                description=description,
                created_by_username="root",
                created_by_role="admin",
            )
            db.add(category)
            db.commit()
            return category.id

    def add_product(
        self, category_id: int, name: str = "Hammer", price: float = 9.99, stock: int = 0
    ) -> int:
        with self.SessionTesting() as db:
            product = Product(name=name, price=price, stock=stock, category_id=category_id)
            db.add(product)
            db.commit()
            return product.id
