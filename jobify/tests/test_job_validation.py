"""Tests for validate_job_values"""
from jobify.app.schemas.job import (
    InvalidJob,
    JobMode,
    JobStatus,
    ValidJob,
    job_form_to_model_dict,
    validate_job_values,
)


def test_valid_values(job_values):
    result = validate_job_values(job_values)
    assert isinstance(result, ValidJob)
    assert result.ok
    assert result.data.status is JobStatus.INTERVIEW
    assert result.data.mode is JobMode.PART_TIME


def test_defaults_for_status_and_mode():
    result = validate_job_values({"position": "Dev", "company": "Acme", "location": "NYC"})
    assert isinstance(result, ValidJob)
    assert job_form_to_model_dict(result.data) == {
        "position": "Dev",
        "company": "Acme",
        "location": "NYC",
        "status": "pending",
        "mode": "full-time",
    }


def test_whitespace_is_stripped_before_length_check():
    result = validate_job_values({"position": "  a ", "company": "Acme", "location": "NYC"})
    assert isinstance(result, InvalidJob)
    assert [e["loc"] for e in result.errors] == ["position"]


def test_missing_fields_reported():
    result = validate_job_values({"position": "Dev"})
    assert not result.ok
    assert sorted(e["loc"] for e in result.errors) == ["company", "location"]


def test_unknown_mode_rejected(job_values):
    job_values["mode"] = "contract"
    result = validate_job_values(job_values)
    assert isinstance(result, InvalidJob)
    assert result.errors[0]["loc"] == "mode"


def test_none_and_non_mapping_rejected():
    assert isinstance(validate_job_values(None), InvalidJob)
    assert isinstance(validate_job_values("position=Dev"), InvalidJob)


def test_extra_keys_ignored(job_values):
    job_values["id"] = "forged"
    job_values["user_id"] = 99
    result = validate_job_values(job_values)
    assert isinstance(result, ValidJob)
    assert "user_id" not in job_form_to_model_dict(result.data)
