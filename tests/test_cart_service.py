from decimal import Decimal

import pytest

from skillupnow.data.models.cart import cart_courses
from skillupnow.domain.errors import ConflictError, ConcurrentModificationError, NotFoundError
from skillupnow.domain.schemas import ModifyCartRequest
from skillupnow.repos.cart_repo import CartRepo
from skillupnow.services.cart_service import CartService


@pytest.fixture
def cart_service(db_session):
    return CartService(db_session)


def _ids(view):
    return [c["id"] for c in view["courses"]]


def test_get_empty_cart(cart_service, customer):
    view = cart_service.get_cart("Rachel")

    assert view["id"] == customer.cart_id
    assert view["username"] == "Rachel"
    assert view["courses"] == []
    assert view["total"] == Decimal("0.00")


def test_get_cart_unknown_user(cart_service):
    with pytest.raises(NotFoundError):
        cart_service.get_cart("ghost")


def test_add_course_increments_total(cart_service, customer, courses):
    python, fastapi, _ = courses

    cart_service.add_course("Rachel", python.id)
    view = cart_service.add_course("Rachel", fastapi.id)

    assert _ids(view) == [python.id, fastapi.id]
    assert view["total"] == Decimal("128.99")


def test_add_course_bumps_version(db_session, cart_service, customer, courses):
    cart_service.add_course("Rachel", courses[0].id)

    cart = CartRepo(db_session).get_cart(customer.cart_id)
    assert cart.version == 2


def test_add_duplicate_course_conflicts(cart_service, customer, courses):
    cart_service.add_course("Rachel", courses[0].id)

    with pytest.raises(ConflictError):
        cart_service.add_course("Rachel", courses[0].id)

    view = cart_service.get_cart("Rachel")
    assert _ids(view) == [courses[0].id]
    assert view["total"] == Decimal("49.99")


def test_add_unknown_course(cart_service, customer):
    with pytest.raises(NotFoundError):
        cart_service.add_course("Rachel", 12345)


def test_remove_course_decrements_total(cart_service, customer, courses):
    python, fastapi, _ = courses
    cart_service.add_course("Rachel", python.id)
    cart_service.add_course("Rachel", fastapi.id)

    view = cart_service.remove_course("Rachel", python.id)

    assert _ids(view) == [fastapi.id]
    assert view["total"] == Decimal("79.00")


def test_remove_course_not_in_cart(cart_service, customer, courses):
    cart_service.add_course("Rachel", courses[0].id)

    with pytest.raises(NotFoundError):
        cart_service.remove_course("Rachel", courses[1].id)

    assert cart_service.get_cart("Rachel")["total"] == Decimal("49.99")


def test_remove_unknown_course(cart_service, customer):
    with pytest.raises(NotFoundError):
        cart_service.remove_course("Rachel", 12345)


def test_total_matches_contents_after_mixed_operations(cart_service, customer, courses):
    a, b, c = courses
    operations = [
        ("add", a), ("add", b), ("add", c),
        ("remove", b), ("add", b), ("remove", a),
        ("remove", c), ("add", a),
    ]

    for op, course in operations:
        if op == "add":
            view = cart_service.add_course("Rachel", course.id)
        else:
            view = cart_service.remove_course("Rachel", course.id)

        expected = sum((item["price"] for item in view["courses"]), Decimal("0.00"))
        assert view["total"] == expected
        assert view["total"] >= Decimal("0.00")

    assert sorted(_ids(view)) == sorted([a.id, b.id])


def test_modify_cart_dispatches(cart_service, customer, courses):
    view = cart_service.modify_cart(ModifyCartRequest(username="Rachel", course_id=courses[0].id, delete=0))
    assert _ids(view) == [courses[0].id]

    view = cart_service.modify_cart(ModifyCartRequest(username="Rachel", course_id=courses[0].id, delete=1))
    assert view["courses"] == []
    assert view["total"] == Decimal("0.00")


def test_version_conflict_is_retried(monkeypatch, cart_service, customer, courses):
    real_update = CartRepo.update_cart_version
    calls = []

    def flaky(self, cart_id, old_version, new_total):
        calls.append(old_version)
        if len(calls) == 1:
            return 0
        return real_update(self, cart_id=cart_id, old_version=old_version, new_total=new_total)

    monkeypatch.setattr(CartRepo, "update_cart_version", flaky)

    view = cart_service.add_course("Rachel", courses[0].id)

    assert len(calls) == 2
    assert _ids(view) == [courses[0].id]
    assert view["total"] == Decimal("49.99")


def test_version_conflict_gives_up(monkeypatch, cart_service, customer, courses):
    monkeypatch.setattr(CartRepo, "update_cart_version", lambda self, **kwargs: 0)

    with pytest.raises(ConcurrentModificationError):
        cart_service.add_course("Rachel", courses[0].id)

    view = cart_service.get_cart("Rachel")
    assert view["courses"] == []
    assert view["total"] == Decimal("0.00")


def test_concurrent_add_of_same_course_conflicts_at_commit(monkeypatch, cart_service, customer, courses):
    real_update = CartRepo.update_cart_version

    def racing(self, cart_id, old_version, new_total):
        rowcount = real_update(self, cart_id=cart_id, old_version=old_version, new_total=new_total)
        # inny request zdazyl wstawic ten sam kurs przed naszym commitem
        self.db.execute(cart_courses.insert().values(cart_id=cart_id, course_id=courses[0].id))
        return rowcount

    monkeypatch.setattr(CartRepo, "update_cart_version", racing)

    with pytest.raises(ConflictError) as exc_info:
        cart_service.add_course("Rachel", courses[0].id)
    assert not isinstance(exc_info.value, ConcurrentModificationError)

    view = cart_service.get_cart("Rachel")
    assert view["courses"] == []
    assert view["total"] == Decimal("0.00")
