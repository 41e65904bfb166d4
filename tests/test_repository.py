"""Tests for the in-memory repositories."""
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from app.models.product import Product
from app.models.user import User


def make_product(name="Widget", price="10.00", stock=5, description=None):
    return Product(name=name, price=Decimal(price), stock=stock, description=description)


def test_save_assigns_increasing_ids(product_repository):
    """Test new records get identifiers 1, 2, 3..."""
    ids = [product_repository.save(make_product(f"P{i}")).id for i in range(3)]

    assert ids == [1, 2, 3]


def test_ids_never_reused_after_delete(product_repository):
    """Test a deleted identifier is not handed out again."""
    first = product_repository.save(make_product("A"))
    second = product_repository.save(make_product("B"))
    product_repository.delete_by_id(second.id)
    product_repository.delete_by_id(first.id)

    third = product_repository.save(make_product("C"))

    assert third.id == 3


def test_find_by_id_returns_saved_record(product_repository):
    """Test a saved record equals the input apart from its identifier."""
    product = make_product("Lamp", "19.90", 4, "Desk lamp")
    saved = product_repository.save(product)

    found = product_repository.find_by_id(saved.id)

    assert found == saved
    assert found.id is not None
    assert (found.name, found.price, found.stock, found.description) == (
        product.name, product.price, product.stock, product.description
    )


def test_find_by_id_missing_returns_none(product_repository):
    assert product_repository.find_by_id(42) is None


def test_save_with_id_overwrites(product_repository):
    """Test saving a record that has an identifier replaces the stored one."""
    saved = product_repository.save(make_product("Old"))
    product_repository.save(Product(name="New", price=Decimal("1"), stock=1, id=saved.id))

    assert product_repository.count() == 1
    assert product_repository.find_by_id(saved.id).name == "New"


def test_save_with_explicit_id_advances_counter(product_repository):
    """Test a caller-supplied identifier is never issued again."""
    product_repository.save(Product(name="Pinned", price=Decimal("1"), stock=1, id=10))

    assert product_repository.save(make_product()).id == 11


def test_delete_and_exists(product_repository):
    saved = product_repository.save(make_product())

    assert product_repository.exists_by_id(saved.id)
    assert product_repository.delete_by_id(saved.id) is True
    assert product_repository.exists_by_id(saved.id) is False


def test_delete_unknown_id_leaves_store_untouched(product_repository):
    product_repository.save(make_product())

    assert product_repository.delete_by_id(999) is False
    assert product_repository.count() == 1


def test_find_all_is_a_snapshot(product_repository):
    """Test mutating the store does not change an earlier result."""
    product_repository.save(make_product("A"))
    snapshot = product_repository.find_all()

    product_repository.save(make_product("B"))

    assert len(snapshot) == 1
    assert product_repository.count() == 2


def test_find_by_name_containing_ignores_case(product_repository):
    product_repository.save(make_product("Apple iPhone"))
    product_repository.save(make_product("Samsung Galaxy"))
    product_repository.save(make_product("apple MacBook"))

    names = {p.name for p in product_repository.find_by_name_containing("APPLE")}

    assert names == {"Apple iPhone", "apple MacBook"}


def test_find_by_price_range_is_inclusive(product_repository):
    product_repository.save(make_product("Free", "0"))
    product_repository.save(make_product("Ten", "10"))
    product_repository.save(make_product("Twenty", "20"))
    product_repository.save(make_product("Thirty", "30"))

    found = product_repository.find_by_price_range(Decimal("10"), Decimal("20"))

    assert {p.name for p in found} == {"Ten", "Twenty"}


def test_stock_filters(product_repository):
    product_repository.save(make_product("Full", stock=3))
    product_repository.save(make_product("Empty", stock=0))

    assert [p.name for p in product_repository.find_in_stock()] == ["Full"]
    assert [p.name for p in product_repository.find_out_of_stock()] == ["Empty"]


def test_find_by_email_ignores_case(user_repository):
    user_repository.save(User(name="Ann", email="Ann@Example.com"))

    assert user_repository.find_by_email("ann@example.COM").name == "Ann"
    assert user_repository.find_by_email("nobody@example.com") is None


def test_find_by_role_and_active_users(user_repository):
    user_repository.save(User(name="Root", email="root@x.com", role="ADMIN"))
    user_repository.save(User(name="Ann", email="ann@x.com", role="user"))
    user_repository.save(User(name="Guest", email="guest@x.com", role="GUEST"))

    assert [u.name for u in user_repository.find_by_role("USER")] == ["Ann"]
    assert [u.name for u in user_repository.find_all_active_users()] == ["Ann", "Root"]


def test_delete_by_email(user_repository):
    user_repository.save(User(name="Ann", email="ann@x.com"))

    assert user_repository.delete_by_email("ANN@x.com") is True
    assert user_repository.delete_by_email("ann@x.com") is False
    assert user_repository.count() == 0


def test_concurrent_saves_get_unique_ids(product_repository):
    """Test parallel inserts never share an identifier."""
    with ThreadPoolExecutor(max_workers=16) as pool:
        saved = list(pool.map(lambda i: product_repository.save(make_product(f"P{i}")), range(200)))

    ids = sorted(p.id for p in saved)

    assert ids == list(range(1, 201))
    assert product_repository.count() == 200


def test_concurrent_reads_during_writes(product_repository):
    """Test scans stay consistent while other threads insert and delete."""
    def writer(i):
        saved = product_repository.save(make_product(f"P{i}"))
        if i % 2:
            product_repository.delete_by_id(saved.id)

    def reader(_):
        return all(p.id is not None for p in product_repository.find_all())

    with ThreadPoolExecutor(max_workers=16) as pool:
        writes = [pool.submit(writer, i) for i in range(200)]
        reads = [pool.submit(reader, i) for i in range(200)]
        for future in writes:
            future.result()
        assert all(future.result() for future in reads)

    assert product_repository.count() == 100
