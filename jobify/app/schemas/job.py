"""
Job Pydantic schemas - create/edit form values, API responses, validation result
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError


class JobStatus(str, Enum):
    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobMode(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    INTERNSHIP = "internship"


class CreateAndEditJob(BaseModel):
    """Values accepted by the create and edit job forms"""
    position: str = Field(min_length=2)
    company: str = Field(min_length=2)
    location: str = Field(min_length=2)
    status: JobStatus = JobStatus.PENDING
    mode: JobMode = JobMode.FULL_TIME

    model_config = {"extra": "ignore", "str_strip_whitespace": True}


class JobOut(BaseModel):
    id: str
    position: str
    company: str
    location: str
    status: str
    mode: str
    createdAt: datetime
    updatedAt: Optional[datetime] = None


class JobListOut(BaseModel):
    jobs: List[JobOut] = Field(default_factory=list)
    count: int = 0
    page: int = 1
    totalPages: int = 0


class StatusStatsOut(BaseModel):
    pending: int = 0
    interview: int = 0
    declined: int = 0


class ChartPoint(BaseModel):
    date: str
    count: int


# --- Validation result ---
@dataclass(frozen=True)
class ValidJob:
    data: CreateAndEditJob
    ok: bool = True


@dataclass(frozen=True)
class InvalidJob:
    errors: list[dict] = field(default_factory=list)
    ok: bool = False


JobValidationResult = Union[ValidJob, InvalidJob]


def validate_job_values(values: Any) -> JobValidationResult:
    """Check raw form values against CreateAndEditJob without raising."""
    try:
        return ValidJob(data=CreateAndEditJob.model_validate(values))
    except ValidationError as e:
        return InvalidJob(
            errors=[
                {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ]
        )


def job_form_to_model_dict(data: CreateAndEditJob) -> dict:
    """Convert validated form values to Job model kwargs"""
    return {
        "position": data.position,
        "company": data.company,
        "location": data.location,
        "status": data.status.value,
        "mode": data.mode.value,
    }


def job_model_to_out(job) -> JobOut:
    """Convert Job DB model to JobOut schema"""
    return JobOut(
        id=job.id,
        position=job.position or "",
        company=job.company or "",
        location=job.location or "",
        status=job.status or "",
        mode=job.mode or "",
        createdAt=job.created_at,
        updatedAt=job.updated_at,
    )
