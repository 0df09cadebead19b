from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from .. import models
from ..core.amenity_catalog import CATEGORIES, POPULAR_AMENITY_IDS, group_by_category, search_amenities
from ..core.amenity_codec import decode_amenities, encode_amenities, repair_amenities
from ..core.payment_plans import payment_plan_text, to_editable_plans, to_persisted_plans
from ..core.project_record import apply_record, project_record
from ..core.reconciliation import build_snapshot, form_to_project, project_to_form
from ..core.time_utils import to_iso, utcnow
from ..database import get_db

router = APIRouter(prefix="/projects", tags=["project-data"])


class AmenityDecodePayload(BaseModel):
    amenities: Any = None


class AmenityEncodePayload(BaseModel):
    selected_ids: list[str] = Field(default_factory=list, alias="selectedIds")


class PaymentPlanDecodePayload(BaseModel):
    payment_plan: Any = Field(default=None, alias="paymentPlan")


class PaymentPlanEncodePayload(BaseModel):
    payment_plans: Any = Field(default=None, alias="paymentPlans")


class ProjectFormPayload(BaseModel):
    name: str = Field(..., min_length=1, max_length=180)
    name_en: str | None = Field(default=None, max_length=180, alias="nameEn")
    slug: str | None = Field(default=None, max_length=180)
    status: str | None = Field(default=None, max_length=32)
    # Editor state is accepted as-is; reconciliation tolerates any shape.
    form: dict[str, Any] = Field(default_factory=dict)


class _DropCollector:
    def __init__(self, context: str):
        self.context = context
        self.dropped: list[str] = []

    def __call__(self, amenity_id: str) -> None:
        self.dropped.append(amenity_id)
        print(f"[project-data] amenity id dropped (not in catalog): {amenity_id} | {self.context}")


def _get_project_or_404(project_id: int, db: Session) -> models.Project:
    project = db.query(models.Project).filter(models.Project.id == int(project_id)).first()
    if not project:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found.")
    return project


def _serialize_catalog(query: str) -> list[dict]:
    grouped = group_by_category(search_amenities(query))
    return [
        {
            "id": category.id,
            "nameEn": category.name_en,
            "nameHe": category.name_he,
            "amenities": [
                {
                    "id": amenity.id,
                    "nameEn": amenity.name_en,
                    "nameHe": amenity.name_he,
                    "icon": amenity.icon,
                }
                for amenity in grouped[category.id]
            ],
        }
        for category in CATEGORIES
    ]


def _editor_payload(project: models.Project) -> dict:
    record = project_record(project)
    return {
        "project": {
            "id": project.id,
            "name": project.name,
            "nameEn": project.name_en,
            "slug": project.slug,
            "status": project.status,
            "updatedAt": project.updated_at,
        },
        "form": project_to_form(record),
    }


@router.get("/amenities/catalog")
def get_amenity_catalog(q: str = Query(default="", max_length=100)):
    return {
        "categories": _serialize_catalog(q),
        "popularIds": list(POPULAR_AMENITY_IDS),
    }


@router.post("/amenities/decode")
def decode_amenity_selection(payload: AmenityDecodePayload):
    return {"selectedIds": decode_amenities(payload.amenities)}


@router.post("/amenities/encode")
def encode_amenity_selection(payload: AmenityEncodePayload):
    collector = _DropCollector("encode")
    amenities = encode_amenities(payload.selected_ids, on_drop=collector)
    return {"amenities": amenities, "droppedIds": collector.dropped}


@router.post("/amenities/repair")
def repair_amenity_data(payload: AmenityDecodePayload):
    collector = _DropCollector("repair")
    return {
        "amenities": repair_amenities(payload.amenities, on_drop=collector),
        "droppedIds": collector.dropped,
    }


@router.post("/payment-plans/editable")
def payment_plans_for_editor(payload: PaymentPlanDecodePayload):
    return {
        "paymentPlans": to_editable_plans(payload.payment_plan),
        "paymentPlanText": payment_plan_text(payload.payment_plan),
    }


@router.post("/payment-plans/persisted")
def payment_plans_for_storage(payload: PaymentPlanEncodePayload):
    return {"paymentPlan": to_persisted_plans(payload.payment_plans)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_project(payload: ProjectFormPayload, db: Session = Depends(get_db)):
    collector = _DropCollector("create")
    fields = form_to_project(payload.form, None, on_drop=collector)
    now_iso = to_iso(utcnow())
    project = models.Project(
        name=payload.name.strip(),
        name_en=(payload.name_en or "").strip() or None,
        slug=(payload.slug or "").strip() or None,
        status=(payload.status or "draft").strip() or "draft",
        price_currency=str(payload.form.get("priceCurrency") or "AED"),
        created_at=now_iso,
        updated_at=now_iso,
    )
    apply_record(project, fields)
    db.add(project)
    db.commit()
    db.refresh(project)
    return {**_editor_payload(project), "droppedIds": collector.dropped}


@router.get("/{project_id}/editor")
def get_project_editor(project_id: int, db: Session = Depends(get_db)):
    project = _get_project_or_404(project_id, db)
    return _editor_payload(project)


@router.put("/{project_id}/editor")
def save_project_editor(project_id: int, payload: ProjectFormPayload, db: Session = Depends(get_db)):
    project = _get_project_or_404(project_id, db)
    record = project_record(project)
    # The snapshot is rebuilt from the stored record, i.e. what the editor loaded.
    snapshot = build_snapshot(record, project_to_form(record))

    collector = _DropCollector(f"project_id={project.id}")
    fields = form_to_project(payload.form, snapshot, on_drop=collector)
    fields["name"] = payload.name.strip()
    if payload.name_en is not None:
        fields["nameEn"] = payload.name_en.strip() or None
    if payload.slug is not None:
        fields["slug"] = payload.slug.strip() or None
    if payload.status is not None:
        fields["status"] = payload.status.strip() or "draft"
    if payload.form.get("priceCurrency"):
        fields["priceCurrency"] = str(payload.form["priceCurrency"])

    changed = apply_record(project, fields)
    if changed:
        project.updated_at = to_iso(utcnow())
        db.commit()
        db.refresh(project)
    return {**_editor_payload(project), "changedFields": changed, "droppedIds": collector.dropped}
