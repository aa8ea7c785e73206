from typing import Any, Mapping

from app.pages.base import PageController, logger
from app.schemas.job import JobForm
from app.schemas.pages import SubmissionView, SubmitState

SIGN_IN_TO_POST = "Please sign in to post a job"
JOBS_ROUTE = "/jobs"


class PostJobPage(PageController):
    """Job intake form.

    Posting is open to anonymous visitors unless ``require_identity`` is set.
    Whatever status the caller sends, new jobs are always stored as active.
    """

    def __init__(self, gateway, require_identity: bool = False):
        super().__init__(gateway)
        self.require_identity = require_identity

    def submit(self, data: Mapping[str, Any] | None) -> SubmissionView:
        return self._submit(JobForm, data, self._post)

    def _post(self, form: JobForm) -> SubmissionView:
        if self.require_identity:
            self._require_identity(SIGN_IN_TO_POST)
        row = form.model_dump()
        row["status"] = "active"
        created = self._write(lambda: self.gateway.jobs.insert(row))
        logger.info("Posted job %s (%s at %s)", created[0]["id"], form.title, form.company)
        # values left empty: the form is reset after a successful post
        return SubmissionView(state=SubmitState.SUCCESS, redirect_to=JOBS_ROUTE)
