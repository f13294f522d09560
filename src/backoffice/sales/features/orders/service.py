import logging
from typing import List, Optional

from ....core.access import Action, Actor, authorize
from ....core.exceptions import BadRequestError
from ..buyers.models import Buyer
from .filters import OrderFilter
from .models import Order, OrderStatus
from .pricing import InvalidSubtotal, compute_units
from .schemas import OrderCreate, OrderPublic, OrderUpdate

logger = logging.getLogger(__name__)


def _to_order_public(order: Order) -> OrderPublic:
    # Expects the buyer relation to be fetched already.
    buyer = order.buyer
    return OrderPublic(
        order_id=order.order_id,
        buyer_id=order.buyer_id,
        orderdate=order.orderdate,
        subtotal=order.subtotal,
        jumlah_produk=order.jumlah_produk,
        status=order.status,
        created_at=order.created_at,
        nama=buyer.nama,
        no_hp=buyer.no_hp,
        alamat=buyer.alamat,
    )


async def _require_buyer(buyer_id: int) -> Buyer:
    buyer = await Buyer.get_or_none(buyer_id=buyer_id)
    if buyer is None:
        raise BadRequestError("Buyer not found.")
    return buyer


def _units_for(subtotal: int, unit_price: int) -> int:
    try:
        return compute_units(subtotal, unit_price)
    except InvalidSubtotal as e:
        raise BadRequestError(str(e))


async def _get_authorized_order(actor: Actor, order_id: int, action: Action) -> Order:
    order = await Order.get_or_none(order_id=order_id).prefetch_related("buyer")
    # Orders carry no owner; sellers pass the policy as admins.
    return authorize(actor, order, action, owner_attr=None, label="Order")


async def list_orders(order_filter: Optional[OrderFilter] = None) -> List[OrderPublic]:
    query = Order.all().prefetch_related("buyer").order_by("-orderdate", "-order_id")
    if order_filter is not None:
        query = order_filter.apply(query)
    return [_to_order_public(order) for order in await query]


async def get_order(actor: Actor, order_id: int) -> OrderPublic:
    return _to_order_public(await _get_authorized_order(actor, order_id, Action.READ))


async def create_order(order_in: OrderCreate, unit_price: int) -> OrderPublic:
    buyer = await _require_buyer(order_in.buyer_id)
    units = _units_for(order_in.subtotal, unit_price)
    order = await Order.create(
        buyer=buyer,
        orderdate=order_in.orderdate,
        subtotal=order_in.subtotal,
        jumlah_produk=units,
        status=order_in.status or OrderStatus.PENDING,
    )
    logger.info(f"Order {order.order_id} created for buyer {buyer.buyer_id}: {units} products")
    full_order = await Order.get(order_id=order.order_id).prefetch_related("buyer")
    return _to_order_public(full_order)


async def update_order(actor: Actor, order_id: int, order_in: OrderUpdate, unit_price: int) -> OrderPublic:
    order = await _get_authorized_order(actor, order_id, Action.EDIT)
    await _require_buyer(order_in.buyer_id)
    units = _units_for(order_in.subtotal, unit_price)

    order.buyer_id = order_in.buyer_id
    order.orderdate = order_in.orderdate
    order.subtotal = order_in.subtotal
    order.jumlah_produk = units
    order.status = order_in.status
    # subtotal and jumlah_produk always go out in the same UPDATE.
    await order.save(update_fields=["buyer_id", "orderdate", "subtotal", "jumlah_produk", "status"])
    logger.info(f"Order {order.order_id} updated: {units} products")

    full_order = await Order.get(order_id=order.order_id).prefetch_related("buyer")
    return _to_order_public(full_order)


async def delete_order(actor: Actor, order_id: int) -> None:
    order = await _get_authorized_order(actor, order_id, Action.DELETE)
    await order.delete()
    logger.info(f"Order {order_id} deleted by {actor.username}")
