from datetime import date

from app.pages.base import PageController, logger
from app.pages.errors import FetchError
from app.schemas.job import JobRow
from app.schemas.pages import JobCard, JobsListingView, LoadState

EMPTY_TITLE = "No jobs found"
EMPTY_MESSAGE = "Check back later for new opportunities."
FAILED_MESSAGE = "We couldn't load jobs right now. Please check back later."

_SEARCH_FIELDS = ("title", "company", "location", "type")


def apply_url(job_id: str) -> str:
    return f"/jobs/{job_id}/apply"


def format_deadline(deadline: str) -> str:
    try:
        return date.fromisoformat(deadline[:10]).strftime("%d %b %Y")
    except ValueError:
        return deadline


def matches(job: JobRow, query: str) -> bool:
    needle = query.casefold()
    return any(needle in getattr(job, field).casefold() for field in _SEARCH_FIELDS)


def job_card(job: JobRow) -> JobCard:
    return JobCard(
        id=job.id,
        title=job.title,
        company=job.company,
        location=job.location,
        type=job.type,
        salary_range=job.salary_range,
        deadline=job.deadline,
        deadline_display=format_deadline(job.deadline),
        apply_url=apply_url(job.id),
    )


class JobsListingPage(PageController):
    """Public listing of active jobs, newest first, with an optional search filter."""

    def load(self, query: str | None = None) -> JobsListingView:
        query = (query or "").strip() or None
        generation = self._next_generation()
        self.view = JobsListingView(state=LoadState.LOADING, query=query)

        try:
            rows = self._fetch(lambda: self.gateway.jobs.select(
                filters={"status": "active"},
                order_by="created_at",
                descending=True,
            ))
        except FetchError as exc:
            logger.error("Error fetching jobs: %s", exc)
            view = JobsListingView(state=LoadState.FAILED, query=query, message=FAILED_MESSAGE)
            return self._publish(generation, view)

        jobs = [JobRow.model_validate(row) for row in rows]
        if query:
            jobs = [job for job in jobs if matches(job, query)]

        if not jobs:
            view = JobsListingView(
                state=LoadState.EMPTY, query=query, title=EMPTY_TITLE, message=EMPTY_MESSAGE,
            )
        else:
            view = JobsListingView(
                state=LoadState.POPULATED, query=query, jobs=[job_card(job) for job in jobs],
            )
        return self._publish(generation, view)
