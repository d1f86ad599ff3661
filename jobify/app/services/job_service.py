"""
Job service - owner-scoped create, list, read, update, delete
"""
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobify.app.core.config import settings
from jobify.app.core.logging_config import get_logger
from jobify.app.models.job import Job
from jobify.app.schemas.job import (
    InvalidJob,
    JobOut,
    job_form_to_model_dict,
    job_model_to_out,
    validate_job_values,
)
from jobify.app.services.job_query import build_job_filter, page_offset, total_pages

logger = get_logger("services.jobs")


# Largest OFFSET the databases accept (signed 64-bit)
_MAX_OFFSET = 2**63 - 1


def _clamp_page(page: int | None, limit: int) -> int:
    """At least 1, and small enough that (page - 1) * limit fits in a BIGINT."""
    if not page or page < 1:
        return 1
    return min(page, _MAX_OFFSET // limit + 1)


def _clamp_limit(limit: int | None) -> int:
    if not limit or limit < 1:
        return settings.jobs_page_size
    return min(limit, settings.jobs_max_page_size)


class JobService:
    """Every query here carries the owner id; there is no unscoped access path."""

    @staticmethod
    def create_job(db: Session, owner_id: int, values: Any) -> Job | None:
        """Validate and insert. Returns None (nothing persisted) on invalid input or DB error."""
        result = validate_job_values(values)
        if isinstance(result, InvalidJob):
            logger.warning("Job create rejected user_id=%s errors=%s", owner_id, result.errors)
            return None
        job = Job(user_id=owner_id, **job_form_to_model_dict(result.data))
        try:
            db.add(job)
            db.commit()
            db.refresh(job)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Job create failed user_id=%s", owner_id)
            return None
        logger.info("Job created user_id=%s job_id=%s", owner_id, job.id)
        return job

    @staticmethod
    def list_jobs(
        db: Session,
        owner_id: int,
        search: str | None = None,
        status: str | None = None,
        page: int | None = 1,
        limit: int | None = None,
    ) -> dict:
        """
        One page of the owner's jobs, newest first, plus the total match count.
        Count runs as a separate query over the same WHERE clauses.
        """
        limit_val = _clamp_limit(limit)
        page_val = _clamp_page(page, limit_val)
        clauses = build_job_filter(owner_id, search, status)
        try:
            jobs = (
                db.query(Job)
                .filter(*clauses)
                .order_by(Job.created_at.desc())
                .offset(page_offset(page_val, limit_val))
                .limit(limit_val)
                .all()
            )
            count = db.query(Job).filter(*clauses).count()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Job list failed user_id=%s", owner_id)
            return {"jobs": [], "count": 0, "page": 1, "totalPages": 0}
        return {
            "jobs": jobs,
            "count": count,
            "page": page_val,
            "totalPages": total_pages(count, limit_val),
        }

    @staticmethod
    def get_job(db: Session, job_id: str, owner_id: int) -> Job | None:
        """Missing and not-owned both come back as None."""
        try:
            return db.query(Job).filter(Job.id == job_id, Job.user_id == owner_id).first()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Job lookup failed user_id=%s job_id=%s", owner_id, job_id)
            return None

    @staticmethod
    def update_job(db: Session, job_id: str, owner_id: int, values: Any) -> Job | None:
        """Overwrite every editable field. id, owner and created_at never change."""
        result = validate_job_values(values)
        if isinstance(result, InvalidJob):
            logger.warning(
                "Job update rejected user_id=%s job_id=%s errors=%s",
                owner_id,
                job_id,
                result.errors,
            )
            return None
        job = JobService.get_job(db, job_id, owner_id)
        if not job:
            return None
        for key, value in job_form_to_model_dict(result.data).items():
            setattr(job, key, value)
        try:
            db.commit()
            db.refresh(job)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Job update failed user_id=%s job_id=%s", owner_id, job_id)
            return None
        logger.info("Job updated user_id=%s job_id=%s", owner_id, job_id)
        return job

    @staticmethod
    def delete_job(db: Session, job_id: str, owner_id: int) -> JobOut | None:
        """Remove the job and return a snapshot of it taken before the delete."""
        job = JobService.get_job(db, job_id, owner_id)
        if not job:
            return None
        snapshot = job_model_to_out(job)
        try:
            db.delete(job)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Job delete failed user_id=%s job_id=%s", owner_id, job_id)
            return None
        logger.info("Job deleted user_id=%s job_id=%s", owner_id, job_id)
        return snapshot
