"""Errors raised by the contractor matcher."""


class JobNotFoundError(LookupError):
    """Raised when matches are requested for a job id that does not exist."""

    def __init__(self, job_id):
        self.job_id = job_id
        super().__init__(f"Job not found with ID: {job_id}")
