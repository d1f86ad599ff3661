"""
Stats service - status counts and applications-per-month chart data
"""
import calendar
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobify.app.core.config import MONTH_LABEL_FORMAT, settings
from jobify.app.core.exceptions import AggregationFailed
from jobify.app.core.logging_config import get_logger
from jobify.app.models.job import Job
from jobify.app.schemas.job import JobStatus

logger = get_logger("services.stats")


def subtract_months(dt: datetime, months: int) -> datetime:
    """Same day `months` earlier, clamped to the end of shorter months (Aug 31 - 6 -> Feb 28)."""
    month_index = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def month_label(dt: datetime) -> str:
    return dt.strftime(MONTH_LABEL_FORMAT)


def fold_monthly_counts(created: list[datetime]) -> list[dict]:
    """
    Count timestamps per month label in first-seen order.
    Months with no timestamps are not emitted.
    """
    series: list[dict] = []
    by_label: dict[str, dict] = {}
    for ts in created:
        label = month_label(ts)
        entry = by_label.get(label)
        if entry:
            entry["count"] += 1
        else:
            entry = {"date": label, "count": 1}
            by_label[label] = entry
            series.append(entry)
    return series


class StatsService:
    @staticmethod
    def status_stats(db: Session, owner_id: int) -> dict[str, int]:
        """Job count per status; every known status is present, zero when absent."""
        try:
            rows = (
                db.query(Job.status, func.count(Job.id))
                .filter(Job.user_id == owner_id)
                .group_by(Job.status)
                .all()
            )
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Status stats failed user_id=%s", owner_id)
            raise AggregationFailed(f"Status stats failed: {e}") from e
        counts = {status: count for status, count in rows}
        return {**{s.value: 0 for s in JobStatus}, **counts}

    @staticmethod
    def monthly_series(
        db: Session,
        owner_id: int,
        window_months: int | None = None,
        now: datetime | None = None,
    ) -> list[dict]:
        """Applications per month over the trailing window, oldest month first."""
        months = window_months if window_months is not None else settings.charts_window_months
        since = subtract_months(now or datetime.utcnow(), months)
        try:
            rows = (
                db.query(Job.created_at)
                .filter(Job.user_id == owner_id, Job.created_at >= since)
                .order_by(Job.created_at.asc())
                .all()
            )
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Monthly series failed user_id=%s", owner_id)
            raise AggregationFailed(f"Monthly series failed: {e}") from e
        return fold_monthly_counts([row[0] for row in rows])
