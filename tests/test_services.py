"""
Tests for the service layer, driven directly against a temporary
database.
"""

import asyncio

import pytest

from product_pricing_api.app.core.exceptions import (
    InvalidCredentials,
    InvalidReference,
    NotFound,
    StoreError,
    ValidationConflict,
)
from product_pricing_api.app.core.security import decode_access_token
from product_pricing_api.app.schemas.product import ProductCreate, ProductPublic, ProductRead
from product_pricing_api.app.schemas.series import SeriesCreate
from product_pricing_api.app.schemas.user import UserCredentials
from product_pricing_api.app.services.auth_service import AuthService
from product_pricing_api.app.services.product_service import ProductService
from product_pricing_api.app.services.series_service import SeriesService


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def auth_service(db, settings) -> AuthService:
    return AuthService(db, settings)


@pytest.fixture
def series_service(db) -> SeriesService:
    return SeriesService(db)


@pytest.fixture
def product_service(db) -> ProductService:
    return ProductService(db)


class TestAuthService:
    def test_register_stores_hash(self, auth_service, db):
        run(auth_service.register(UserCredentials(username="alice", password="pw123456")))

        row = db.fetchone("SELECT username, password FROM users")
        assert row["username"] == "alice"
        assert row["password"] != "pw123456"
        assert row["password"].startswith("$2b$04$")

    def test_register_duplicate(self, auth_service):
        credentials = UserCredentials(username="alice", password="pw123456")
        run(auth_service.register(credentials))

        with pytest.raises(ValidationConflict):
            run(auth_service.register(credentials))

    def test_register_empty_username(self, auth_service, db):
        with pytest.raises(StoreError) as exc_info:
            run(auth_service.register(UserCredentials(username="", password="pw123456")))

        assert exc_info.value.message == "username is required"
        assert db.fetchone("SELECT COUNT(*) AS count FROM users")["count"] == 0

    def test_login_issues_token(self, auth_service, db, settings):
        credentials = UserCredentials(username="alice", password="pw123456")
        run(auth_service.register(credentials))

        token = run(auth_service.login(credentials))

        claims = decode_access_token(token, settings.jwt_secret)
        user_id = db.fetchone("SELECT id FROM users WHERE username = 'alice'")["id"]
        assert claims["username"] == "alice"
        assert claims["id"] == user_id
        assert claims["exp"] - claims["iat"] == settings.access_token_expire_minutes * 60

    def test_login_unknown_user(self, auth_service):
        with pytest.raises(InvalidCredentials) as exc_info:
            run(auth_service.login(UserCredentials(username="ghost", password="pw")))

        assert exc_info.value.message == "User not found"

    def test_login_wrong_password(self, auth_service):
        run(auth_service.register(UserCredentials(username="alice", password="pw123456")))

        with pytest.raises(InvalidCredentials) as exc_info:
            run(auth_service.login(UserCredentials(username="alice", password="wrong")))

        assert exc_info.value.message == "Invalid password"


class TestSeriesService:
    def test_create_and_get(self, series_service):
        created = run(series_service.create_series(SeriesCreate(name="S1")))

        fetched = run(series_service.get_series(created.id))

        assert fetched == created
        assert fetched.name == "S1"

    def test_duplicate_name(self, series_service):
        run(series_service.create_series(SeriesCreate(name="S1")))

        with pytest.raises(ValidationConflict):
            run(series_service.create_series(SeriesCreate(name="S1")))

    def test_list_in_insertion_order(self, series_service):
        for name in ("B", "A", "C"):
            run(series_service.create_series(SeriesCreate(name=name)))

        assert [s.name for s in run(series_service.list_series())] == ["B", "A", "C"]

    def test_get_missing(self, series_service):
        with pytest.raises(NotFound):
            run(series_service.get_series("000000000000000000000000"))


class TestProductService:
    @pytest.fixture
    def series_id(self, series_service) -> str:
        return run(series_service.create_series(SeriesCreate(name="S1"))).id

    def test_create_with_missing_series(self, product_service, db):
        with pytest.raises(InvalidReference):
            run(product_service.create_product(ProductCreate(name="P", seriesId="nope")))

        assert db.fetchone("SELECT COUNT(*) AS count FROM products")["count"] == 0

    def test_create_without_series_id(self, product_service):
        with pytest.raises(InvalidReference):
            run(product_service.create_product(ProductCreate(name="P")))

    def test_create_returns_expanded_series(self, product_service, series_id):
        product = run(product_service.create_product(
            ProductCreate(name="P", purchasePrice=10, sellingPrice=15, source="shop", seriesId=series_id)
        ))

        assert isinstance(product, ProductRead)
        assert product.series.id == series_id
        assert product.series.name == "S1"
        assert product.purchase_price == 10
        assert product.source == "shop"

    def test_public_listing_type(self, product_service, series_id):
        run(product_service.create_product(ProductCreate(name="P", seriesId=series_id)))

        public = run(product_service.list_products(public_view=True))
        full = run(product_service.list_products(public_view=False))

        assert [type(p) for p in public] == [ProductPublic]
        assert [type(p) for p in full] == [ProductRead]
        assert public[0].id == full[0].id

    def test_list_by_series(self, product_service, series_service, series_id):
        other_id = run(series_service.create_series(SeriesCreate(name="S2"))).id
        for index in range(3):
            run(product_service.create_product(ProductCreate(name=f"P{index}", seriesId=series_id)))
        run(product_service.create_product(ProductCreate(name="Other", seriesId=other_id)))

        products = run(product_service.list_products_by_series(series_id))

        assert [p.name for p in products] == ["P0", "P1", "P2"]
        assert {p.series.name for p in products} == {"S1"}

    def test_list_by_series_empty(self, product_service, series_id):
        assert run(product_service.list_products_by_series(series_id)) == []

    def test_list_by_missing_series(self, product_service):
        with pytest.raises(NotFound):
            run(product_service.list_products_by_series("missing"))

    def test_get_missing(self, product_service):
        with pytest.raises(NotFound):
            run(product_service.get_product("missing"))
