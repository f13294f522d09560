"""API routes for managing buyers."""
from fastapi import APIRouter, Depends, status
from typing import List

from ....common.schemas import ApiResponse, MessageResponse
from ..auth.security import get_current_seller
from .schemas import BuyerCreate, BuyerPublic, BuyerUpdate
from . import service

router = APIRouter(
    tags=["Buyers"],
    dependencies=[Depends(get_current_seller)],
)


@router.get("/buyers", response_model=ApiResponse[List[BuyerPublic]])
async def list_buyers():
    return ApiResponse(data=await service.list_buyers())


@router.get("/buyer/{buyer_id}", response_model=ApiResponse[BuyerPublic])
async def get_buyer(buyer_id: int):
    return ApiResponse(data=await service.get_buyer(buyer_id))


@router.post("/buyer", response_model=ApiResponse[BuyerPublic], status_code=status.HTTP_201_CREATED)
async def create_buyer(buyer_in: BuyerCreate):
    return ApiResponse(message="Buyer saved.", data=await service.create_buyer(buyer_in))


@router.put("/buyer/{buyer_id}", response_model=ApiResponse[BuyerPublic])
async def update_buyer(buyer_id: int, buyer_in: BuyerUpdate):
    return ApiResponse(message="Buyer updated.", data=await service.update_buyer(buyer_id, buyer_in))


@router.delete("/buyer/{buyer_id}", response_model=MessageResponse)
async def delete_buyer(buyer_id: int):
    await service.delete_buyer(buyer_id)
    return MessageResponse(message="Buyer deleted.")
