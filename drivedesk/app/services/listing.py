"""Sorting and grouping helpers shared by list endpoints."""

from collections import defaultdict
from typing import Dict, Iterable, List

from fastapi import HTTPException
from sqlalchemy.orm import Query

from drivedesk.app.schemas.student import StudentCategoryGroup

CATEGORY_PREVIEW_SIZE = 5


def apply_sorting(query: Query, supported_sort_fields: Dict[str, object], sort_by: str, sort_order: str) -> Query:
    if sort_by not in supported_sort_fields:
        raise HTTPException(status_code=400, detail="Invalid sort_by field")
    sort_order_normalized = (sort_order or "desc").lower()
    if sort_order_normalized not in {"asc", "desc"}:
        raise HTTPException(status_code=400, detail="Invalid sort_order value")

    sort_column = supported_sort_fields[sort_by]
    if sort_order_normalized == "asc":
        return query.order_by(sort_column.asc())
    return query.order_by(sort_column.desc())


def group_students_by_category(students: Iterable) -> List[StudentCategoryGroup]:
    by_category: Dict[str, list] = defaultdict(list)
    for student in students:
        by_category[student.license_category].append(student)

    return [
        StudentCategoryGroup(
            category=category,
            name=f"Category {category}",
            student_count=len(members),
            student_ids=[s.id for s in members[:CATEGORY_PREVIEW_SIZE]],
        )
        for category, members in sorted(by_category.items())
    ]
