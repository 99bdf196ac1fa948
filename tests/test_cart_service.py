import pytest

from app.core.errors import OutOfStock, ProductNotFound
from app.schemas.cart import SetPrice, SetQuantity, SetSize
from app.services.cart_service import CartService
from app.services.order_service import compute_total
from tests.helpers import make_product

service = CartService()


def test_add_to_cart_scenario(state):
    product = make_product(sizes=["S", "M"], stock_by_size={"S": 0, "M": 3}, price=500)

    item = service.add_to_cart(state, product)

    assert (item.size, item.price, item.quantity) == ("M", 500, 1)
    assert item.product_id == "P1"
    assert compute_total(state.cart.items) == 500


@pytest.mark.parametrize(
    "sizes, stock, expected",
    [
        (["S", "M", "L"], {"S": 1, "M": 1, "L": 1}, "S"),
        (["L", "S"], {"L": 2, "S": 5}, "L"),
        (["XL", "M", "S"], {"M": 4, "S": 9}, "M"),
        (["Free Size"], {"Free Size": 1}, "Free Size"),
    ],
)
def test_size_choice_follows_declared_order(state, sizes, stock, expected):
    item = service.add_to_cart(state, make_product(sizes=sizes, stock_by_size=stock))
    assert item.size == expected


def test_out_of_stock_leaves_cart_unchanged(state):
    service.add_to_cart(state, make_product(id="P0"))
    before = state.cart.list_items()

    with pytest.raises(OutOfStock):
        service.add_to_cart(state, make_product(id="P2", stock_by_size={"S": 0, "M": 0}))
    with pytest.raises(OutOfStock):
        service.add_to_cart(state, make_product(id="P3", sizes=["L"], stock_by_size={}))

    assert state.cart.list_items() == before


def test_add_by_id_requires_catalog_product(state):
    with pytest.raises(ProductNotFound):
        service.add_by_id(state, "missing")

    state.catalog.products = [make_product(id="P7")]
    assert service.add_by_id(state, "P7").product_id == "P7"


def test_line_is_a_snapshot_of_price(state):
    product = make_product(price=500)
    state.catalog.products = [product]
    service.add_to_cart(state, product)

    service.update_cart_item(state, 0, SetPrice(op="set_price", value=450))

    assert state.cart.items[0].price == 450
    assert product.price == 500


def test_same_product_twice_gives_two_lines(state):
    product = make_product()
    service.add_to_cart(state, product)
    service.add_to_cart(state, product)
    assert len(state.cart.items) == 2


def test_remove_out_of_range_is_noop(state):
    service.add_to_cart(state, make_product())

    service.remove_from_cart(state, 0)
    service.remove_from_cart(state, 0)
    service.remove_from_cart(state, 5)
    service.remove_from_cart(state, -1)

    assert state.cart.items == []


def test_remove_keeps_order_of_remaining_lines(state):
    for pid in ("A", "B", "C"):
        service.add_to_cart(state, make_product(id=pid))

    service.remove_from_cart(state, 1)

    assert [i.product_id for i in state.cart.items] == ["A", "C"]


def test_update_variants(state):
    service.add_to_cart(state, make_product(sizes=["S", "M"], stock_by_size={"S": 1, "M": 1}))

    service.update_cart_item(state, 0, SetSize(op="set_size", value="M"))
    service.update_cart_item(state, 0, SetQuantity(op="set_quantity", value=3))
    service.update_cart_item(state, 0, SetPrice(op="set_price", value=400))

    item = state.cart.items[0]
    assert (item.size, item.quantity, item.price) == ("M", 3, 400)
    assert compute_total(state.cart.items) == 1200


def test_size_change_is_not_rechecked_against_stock(state):
    service.add_to_cart(state, make_product(stock_by_size={"S": 0, "M": 3}))

    item = service.update_cart_item(state, 0, SetSize(op="set_size", value="S"))

    assert item is not None and item.size == "S"


def test_update_out_of_range_is_noop(state):
    assert service.update_cart_item(state, 3, SetQuantity(op="set_quantity", value=2)) is None


def test_summary_resolves_lines_against_catalog(state):
    product = make_product(id="P1", price=300)
    state.catalog.products = [product]
    service.add_to_cart(state, product)
    service.add_to_cart(state, make_product(id="GONE", price=200))
    service.update_cart_item(state, 1, SetQuantity(op="set_quantity", value=2))

    summary = service.get_cart_summary(state)

    assert summary.total_quantity == 3
    assert summary.total_amount == 700
    first, second = summary.items
    assert (first.index, first.image, first.stock_by_size) == (0, product.image, {"S": 0, "M": 3})
    assert (second.index, second.line_total, second.product_sizes) == (1, 400, None)
