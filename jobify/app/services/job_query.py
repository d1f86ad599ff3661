"""
Job list filters: owner scope, free-text search, status, pagination offset
"""
from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from jobify.app.core.config import STATUS_ALL
from jobify.app.models.job import Job


def build_job_filter(
    owner_id: int,
    search: str | None = None,
    status: str | None = None,
) -> list[ColumnElement]:
    """
    WHERE clauses for a job listing. The owner clause is always first and always present;
    search and status only ever narrow it.
    """
    clauses: list[ColumnElement] = [Job.user_id == owner_id]
    if search:
        clauses.append(
            or_(
                Job.position.contains(search, autoescape=True),
                Job.company.contains(search, autoescape=True),
            )
        )
    if status and status != STATUS_ALL:
        clauses.append(Job.status == status)
    return clauses


def page_offset(page: int, limit: int) -> int:
    """Rows to skip: page 1 -> 0, page 2 -> limit, ..."""
    return (page - 1) * limit


def total_pages(count: int, limit: int) -> int:
    """ceil(count / limit); an empty result has 0 pages."""
    if limit <= 0:
        return 0
    return -(-count // limit)
