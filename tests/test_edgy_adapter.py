import pytest

import edgy
from fixturist import BlueprintRegistry, Computed, EdgyModelAdapter, PersistenceError
from tests.settings import DATABASE_URL
from tests.support import Post

database = edgy.Database(DATABASE_URL)
models = edgy.Registry(database=database)


class User(edgy.StrictModel):
    id: int = edgy.IntegerField(primary_key=True, autoincrement=True)
    name: str = edgy.CharField(max_length=100)
    email: str = edgy.CharField(max_length=200, unique=True)
    age: int = edgy.IntegerField(default=18)
    is_admin: bool = edgy.BooleanField(default=False)

    class Meta:
        registry = models


class Product(edgy.StrictModel):
    id: int = edgy.IntegerField(primary_key=True, autoincrement=True)
    name: str = edgy.CharField(max_length=100)
    slug: str = edgy.CharField(max_length=100)
    rating: int = edgy.IntegerField(gte=1, lte=5, default=1)

    class Meta:
        registry = models
        tablename = "products"


@pytest.fixture(autouse=True)
def create_test_database():
    with models.with_async_env():
        edgy.run_sync(models.create_all())
        yield
        edgy.run_sync(models.drop_all())


@pytest.fixture
def factory():
    factory = BlueprintRegistry(adapter=EdgyModelAdapter(models), autoload=False)
    factory.define(
        User,
        lambda faker, overrides: {"name": faker.name(), "email": faker.unique.email(), "age": 30},
    )
    factory.define(
        User,
        lambda faker, overrides: {
            "name": faker.name(),
            "email": faker.unique.email(),
            "is_admin": True,
        },
        alias="admin",
    )
    factory.define(
        "Product",
        lambda faker, overrides: {
            "name": faker.word(),
            "slug": Computed(lambda attributes: attributes["name"].lower().replace(" ", "-")),
            "rating": faker.random_int(min=1, max=5),
        },
    )
    return factory


def test_build_is_transient(factory):
    user = factory.build(User, {"age": 31})

    assert isinstance(user, User)
    assert user.age == 31
    assert user.name
    assert getattr(user, "id", None) is None
    assert edgy.run_sync(User.query.count()) == 0


def test_create_round_trip(factory):
    product = factory.create("Product", {"name": "Blue Chair"})

    assert product.id is not None
    stored = edgy.run_sync(Product.query.get(id=product.id))
    assert stored.name == "Blue Chair"
    assert stored.slug == "blue-chair"
    assert stored.rating == product.rating


def test_create_many(factory):
    admins = factory.create_list(User, 3, alias="admin")

    assert len({admin.id for admin in admins}) == 3
    assert edgy.run_sync(User.query.filter(is_admin=True).count()) == 3


def test_create_many_keeps_earlier_writes(factory):
    factory.create(User, {"email": "taken@example.com"})
    emails = iter(["first@example.com", "second@example.com", "taken@example.com"])
    factory.define(
        User,
        lambda faker, overrides: {"name": faker.name(), "email": next(emails)},
        alias="batch",
    )

    with pytest.raises(PersistenceError):
        factory.create_list(User, 3, alias="batch")

    assert edgy.run_sync(User.query.count()) == 3


def test_flush_all(factory):
    factory.create_list(User, 3)
    factory.create(User, alias="admin")
    factory.create_list("Product", 2)

    factory.flush_all()

    assert edgy.run_sync(User.query.count()) == 0
    assert edgy.run_sync(Product.query.count()) == 0
    assert factory.create(User).id == 1
    assert factory.create("Product").id == 1


def test_resolve_model():
    adapter = EdgyModelAdapter(models)

    assert adapter.resolve_model("User") is User
    assert adapter.resolve_model("tests.support.Post") is Post
    assert adapter.table_name(Product) == "products"

    with pytest.raises(LookupError):
        adapter.resolve_model("Order")


def test_resolve_model_without_registry():
    adapter = EdgyModelAdapter()

    with pytest.raises(LookupError):
        adapter.resolve_model("Order")
