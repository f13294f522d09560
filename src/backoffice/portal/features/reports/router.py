from fastapi import APIRouter, Depends, status
from typing import Annotated, List

from ....common.schemas import ApiResponse, MessageResponse
from ....core.access import Actor
from ..auth.security import get_current_actor, get_current_admin
from .schemas import (
    ReportCreate, ReportDelete, ReportPublic, ReportStatusUpdate,
    ReportUpdate, ReportWithReporter,
)
from . import service as report_service

router = APIRouter(
    prefix="/laporan",
    tags=["Reports"],
)


@router.post("", response_model=ApiResponse[ReportPublic], status_code=status.HTTP_201_CREATED)
async def create_report(
    report_in: ReportCreate,
    actor: Annotated[Actor, Depends(get_current_actor)],
):
    report = await report_service.create_report(actor, report_in)
    return ApiResponse(message="Report submitted.", data=report)


@router.get("/user", response_model=ApiResponse[List[ReportPublic]])
async def list_my_reports(actor: Annotated[Actor, Depends(get_current_actor)]):
    return ApiResponse(data=await report_service.list_reports_for_user(actor))


@router.get("/all", response_model=ApiResponse[List[ReportWithReporter]])
async def list_all_reports(admin: Annotated[Actor, Depends(get_current_admin)]):
    return ApiResponse(data=await report_service.list_all_reports())


@router.post("/edit", response_model=ApiResponse[ReportPublic])
async def edit_report(
    report_in: ReportUpdate,
    actor: Annotated[Actor, Depends(get_current_actor)],
):
    report = await report_service.update_report(actor, report_in)
    return ApiResponse(message="Report updated.", data=report)


@router.post("/hapus", response_model=MessageResponse)
async def delete_report(
    report_in: ReportDelete,
    actor: Annotated[Actor, Depends(get_current_actor)],
):
    await report_service.delete_report(actor, report_in.id)
    return MessageResponse(message="Report deleted.")


@router.post("/status", response_model=ApiResponse[ReportPublic])
async def set_report_status(
    status_in: ReportStatusUpdate,
    admin: Annotated[Actor, Depends(get_current_admin)],
):
    report = await report_service.set_report_status(status_in)
    return ApiResponse(message="Status updated.", data=report)


@router.get("/{report_id}", response_model=ApiResponse[ReportPublic])
async def get_report(
    report_id: int,
    actor: Annotated[Actor, Depends(get_current_actor)],
):
    return ApiResponse(data=await report_service.get_report(actor, report_id))
