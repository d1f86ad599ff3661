from jobify.app.models.user import User
from jobify.app.models.job import Job
