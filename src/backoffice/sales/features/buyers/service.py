import logging
from typing import List

from ....core.exceptions import ConflictError, NotFoundError
from ..orders.models import Order
from .models import Buyer
from .schemas import BuyerCreate, BuyerPublic, BuyerUpdate

logger = logging.getLogger(__name__)


async def _get_buyer_or_404(buyer_id: int) -> Buyer:
    buyer = await Buyer.get_or_none(buyer_id=buyer_id)
    if buyer is None:
        raise NotFoundError("Buyer not found.")
    return buyer


async def list_buyers() -> List[BuyerPublic]:
    buyers = await Buyer.all().order_by("nama", "buyer_id")
    return [BuyerPublic.model_validate(b) for b in buyers]


async def get_buyer(buyer_id: int) -> BuyerPublic:
    return BuyerPublic.model_validate(await _get_buyer_or_404(buyer_id))


async def create_buyer(buyer_in: BuyerCreate) -> BuyerPublic:
    buyer = await Buyer.create(**buyer_in.model_dump())
    logger.info(f"Buyer {buyer.buyer_id} created")
    return BuyerPublic.model_validate(buyer)


async def update_buyer(buyer_id: int, buyer_in: BuyerUpdate) -> BuyerPublic:
    buyer = await _get_buyer_or_404(buyer_id)
    buyer.update_from_dict(buyer_in.model_dump())
    await buyer.save(update_fields=["nama", "alamat", "no_hp"])
    return BuyerPublic.model_validate(buyer)


async def delete_buyer(buyer_id: int) -> None:
    """Deletes a buyer that no order refers to.

    Raises:
        NotFoundError: If the buyer does not exist.
        ConflictError: If at least one order still references the buyer.
    """
    buyer = await _get_buyer_or_404(buyer_id)
    if await Order.filter(buyer_id=buyer_id).exists():
        raise ConflictError("Buyer cannot be deleted because it still has orders.")
    await buyer.delete()
    logger.info(f"Buyer {buyer_id} deleted")
