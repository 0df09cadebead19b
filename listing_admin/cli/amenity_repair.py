from __future__ import annotations

import argparse
from typing import Iterable, List, Set

from ..core.amenity_codec import repair_amenities
from ..core.project_record import dump_json_field, parse_json_field
from ..core.time_utils import to_iso, utcnow


def _parse_project_ids(values: Iterable[str]) -> List[int]:
    project_ids: Set[int] = set()
    for value in values:
        for token in str(value).split(","):
            token = token.strip()
            if not token:
                continue
            project_ids.add(int(token))
    return sorted(project_ids)


def _load_projects(db, project_ids: List[int], limit: int):
    from .. import models

    query = db.query(models.Project).order_by(models.Project.id.asc())
    if project_ids:
        query = query.filter(models.Project.id.in_(project_ids))
    if limit > 0:
        query = query.limit(limit)
    return query.all()


def repair_projects(projects, dry_run: bool) -> dict:
    """Rewrite amenity JSON of projects whose canonical form differs.

    Records without decodable amenities are left alone.
    """
    items = []
    now_iso = to_iso(utcnow())

    for project in projects:
        current = parse_json_field(project.amenities_json)
        dropped: list[str] = []
        repaired = repair_amenities(current, on_drop=dropped.append)
        if repaired is None or repaired == current:
            continue

        items.append(
            {
                "project_id": project.id,
                "before_items": sum(len(group.get("items") or []) for group in current if isinstance(group, dict))
                if isinstance(current, list)
                else 0,
                "after_items": sum(len(group["items"]) for group in repaired),
                "dropped": dropped,
            }
        )
        if not dry_run:
            project.amenities_json = dump_json_field(repaired)
            project.updated_at = now_iso

    return {
        "checked": len(projects),
        "repaired": len(items),
        "items": items,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Repair legacy or corrupted project amenity records.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report changes without DB update.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Maximum number of projects to scan.",
    )
    parser.add_argument(
        "--project-id",
        action="append",
        default=[],
        help="Target project ids (repeatable or comma-separated).",
    )

    args = parser.parse_args()

    try:
        from .. import models  # noqa: F401
        from ..database import SessionLocal, ensure_runtime_schema
    except ModuleNotFoundError as exc:
        print(f"DB mode unavailable: {exc}")
        return 1

    ensure_runtime_schema()
    project_ids = _parse_project_ids(args.project_id)

    db = SessionLocal()
    try:
        projects = _load_projects(db, project_ids=project_ids, limit=max(0, args.limit))
        if not projects:
            print("No projects matched the filter.")
            return 0

        print(f"[amenity_repair] projects={len(projects)} dry_run={args.dry_run}")
        result = repair_projects(projects, dry_run=args.dry_run)

        if args.dry_run:
            db.rollback()
        else:
            db.commit()

        print(f"[amenity_repair] checked={result['checked']} repaired={result['repaired']}")
        for item in result["items"][:20]:
            print(
                "  [repaired]"
                f" project_id={item['project_id']}"
                f" items={item['before_items']}->{item['after_items']}"
                f" dropped={item['dropped']}"
            )
        return 0
    except Exception as exc:  # noqa: BLE001
        db.rollback()
        print(f"[amenity_repair] failed: {type(exc).__name__}: {exc}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
