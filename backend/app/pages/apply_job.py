from typing import Any, Mapping

from app.pages.base import PageController, logger
from app.pages.errors import FetchError
from app.pages.jobs_listing import format_deadline
from app.schemas.application import ApplicationForm
from app.schemas.job import JobRow
from app.schemas.pages import ApplyPageView, JobDetail, LoadState, SubmissionView, SubmitState

NOT_FOUND_MESSAGE = "Job not found"
SIGN_IN_TO_APPLY = "Please sign in to apply"
PROFILE_ROUTE = "/profile"


class ApplyJobPage(PageController):
    def __init__(self, gateway, job_id: str):
        super().__init__(gateway)
        self.job_id = job_id

    def load(self) -> ApplyPageView:
        generation = self._next_generation()
        self.view = ApplyPageView(state=LoadState.LOADING)
        try:
            row = self._fetch(lambda: self.gateway.jobs.select_one({"id": self.job_id}))
        except FetchError as exc:
            logger.error("Error fetching job %s: %s", self.job_id, exc)
            return self._publish(generation, ApplyPageView(state=LoadState.NOT_FOUND, error=NOT_FOUND_MESSAGE))

        job = JobRow.model_validate(row)
        detail = JobDetail(
            id=job.id,
            title=job.title,
            company=job.company,
            location=job.location,
            type=job.type,
            description=job.description,
            requirements=job.requirements,
            salary_range=job.salary_range,
            deadline=job.deadline,
            deadline_display=format_deadline(job.deadline),
        )
        return self._publish(generation, ApplyPageView(state=LoadState.READY, job=detail))

    def submit(self, data: Mapping[str, Any] | None) -> SubmissionView:
        return self._submit(ApplicationForm, data, self._apply)

    def _apply(self, form: ApplicationForm) -> SubmissionView:
        identity = self._require_identity(SIGN_IN_TO_APPLY)
        self._write(lambda: self.gateway.applications.insert({
            "job_id": self.job_id,
            "user_id": identity.user_id,
            "resume_url": form.resume_url,
            "cover_letter": form.cover_letter,
        }))
        logger.info("User %s applied to job %s", identity.user_id, self.job_id)
        return SubmissionView(state=SubmitState.SUCCESS, redirect_to=PROFILE_ROUTE)
