"""
Control-flow exceptions that end a request with a redirect.
Handled in main.py; nothing after the raise runs.
"""
from jobify.app.core.config import settings


class RedirectRequired(Exception):
    """Abort the current action and send the caller to `location`."""

    def __init__(self, location: str, reason: str = ""):
        super().__init__(reason or location)
        self.location = location
        self.reason = reason


class AuthRedirect(RedirectRequired):
    """No usable identity on the request."""

    def __init__(self, reason: str = "Not authenticated"):
        super().__init__(settings.public_entry_path, reason)


class JobNotFoundRedirect(RedirectRequired):
    """Point lookup found no job owned by the caller."""

    def __init__(self, job_id: str):
        super().__init__(settings.jobs_redirect_path, f"Job not found id={job_id}")
        self.job_id = job_id


class AggregationFailed(RedirectRequired):
    """Stats or chart query failed; fall back to the job listing."""

    def __init__(self, reason: str = "Aggregation failed"):
        super().__init__(settings.jobs_redirect_path, reason)
