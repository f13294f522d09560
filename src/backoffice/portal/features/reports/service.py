"""
Citizen report service.

Every per-record operation goes through `authorize`, so the owner-or-admin
rule and the "not found before forbidden" ordering are applied the same way
for reading, editing and deleting.
"""
import logging
from typing import List

from ....core.access import Action, Actor, authorize
from ....core.exceptions import NotFoundError
from .models import Report
from .schemas import ReportCreate, ReportPublic, ReportStatusUpdate, ReportUpdate, ReportWithReporter

logger = logging.getLogger(__name__)

REPORT_DEFAULTS = {"nama": "Anonim", "email": "-"}


async def _get_authorized_report(actor: Actor, report_id: int, action: Action) -> Report:
    report = await Report.get_or_none(id=report_id)
    return authorize(actor, report, action, label="Report")


async def create_report(actor: Actor, report_in: ReportCreate) -> ReportPublic:
    report = await Report.create(
        user_id=actor.id,
        nama=report_in.nama or REPORT_DEFAULTS["nama"],
        email=report_in.email or REPORT_DEFAULTS["email"],
        kategori=report_in.kategori,
        isi=report_in.isi,
    )
    logger.info(f"Report {report.id} filed by {actor.username}")
    return ReportPublic.model_validate(report)


async def list_reports_for_user(actor: Actor) -> List[ReportPublic]:
    reports = await Report.filter(user_id=actor.id).order_by("-id")
    return [ReportPublic.model_validate(r) for r in reports]


async def list_all_reports() -> List[ReportWithReporter]:
    reports = await Report.all().prefetch_related("user").order_by("-id")
    return [
        ReportWithReporter(
            **ReportPublic.model_validate(r).model_dump(),
            username=r.user.username if r.user else None,
        )
        for r in reports
    ]


async def get_report(actor: Actor, report_id: int) -> ReportPublic:
    report = await _get_authorized_report(actor, report_id, Action.READ)
    return ReportPublic.model_validate(report)


async def update_report(actor: Actor, report_in: ReportUpdate) -> ReportPublic:
    """Edits the given fields of a report; fields left out keep their value
    and an explicit null clears `kategori`."""
    report = await _get_authorized_report(actor, report_in.id, Action.EDIT)
    changes = report_in.model_dump(exclude={"id"}, exclude_unset=True)
    # Null resets a contact field to its default.
    for field, default in REPORT_DEFAULTS.items():
        if field in changes and not changes[field]:
            changes[field] = default
    if changes:
        report.update_from_dict(changes)
        await report.save(update_fields=[*changes.keys(), "updated_at"])
        logger.info(f"Report {report.id} edited by {actor.username}")
    return ReportPublic.model_validate(report)


async def delete_report(actor: Actor, report_id: int) -> None:
    report = await _get_authorized_report(actor, report_id, Action.DELETE)
    await report.delete()
    logger.info(f"Report {report_id} deleted by {actor.username}")


async def set_report_status(status_in: ReportStatusUpdate) -> ReportPublic:
    report = await Report.get_or_none(id=status_in.id)
    if report is None:
        raise NotFoundError("Report not found.")
    report.status = status_in.status
    await report.save(update_fields=["status", "updated_at"])
    return ReportPublic.model_validate(report)
