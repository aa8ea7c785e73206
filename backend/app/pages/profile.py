from typing import Any, Mapping

from app.pages.base import PageController, logger
from app.pages.errors import FetchError
from app.schemas.application import ApplicationRow
from app.schemas.auth import Identity
from app.schemas.pages import (
    ApplicationCard,
    BadgeTier,
    LoadState,
    ProfileFormValues,
    ProfilePageView,
    SubmissionView,
    SubmitState,
)
from app.schemas.profile import ProfileForm, ProfileRow, join_skills, split_skills
from app.utils.timestamps import utcnow_iso

SIGN_IN_TO_EDIT = "Please sign in to edit your profile"
NO_APPLICATIONS = "No applications yet"
_JOB_SUMMARY = ["title", "company", "location"]


def badge_tier(status: str) -> BadgeTier:
    if status == "pending":
        return BadgeTier.HIGHLIGHT
    if status == "accepted":
        return BadgeTier.POSITIVE
    return BadgeTier.NEGATIVE


def status_label(status: str) -> str:
    return status[:1].upper() + status[1:]


def profile_form_from_row(row: ProfileRow) -> ProfileFormValues:
    return ProfileFormValues(
        full_name=row.full_name,
        email=row.email,
        phone=row.phone or "",
        location=row.location or "",
        bio=row.bio or "",
        skills=join_skills(row.skills),
    )


def application_card(row: dict) -> ApplicationCard:
    application = ApplicationRow.model_validate(row)
    job = row.get("job") or {}
    return ApplicationCard(
        id=application.id,
        job_id=application.job_id,
        job_title=job.get("title"),
        job_company=job.get("company"),
        job_location=job.get("location"),
        status=application.status,
        status_label=status_label(application.status),
        badge=badge_tier(application.status),
        created_at=application.created_at,
    )


class ProfilePage(PageController):
    """Applicant profile form plus the applicant's own applications.

    The profile read and the applications read are independent: either may
    fail without affecting the other, and a missing profile simply leaves the
    form with empty defaults.
    """

    def load(self) -> ProfilePageView:
        generation = self._next_generation()
        self.view = ProfilePageView(state=LoadState.LOADING, authenticated=False, form=ProfileFormValues())

        identity = self._current_identity()
        form = ProfileFormValues()
        applications: list[ApplicationCard] = []
        if identity is not None:
            try:
                form = self._fetch_profile(identity)
            except FetchError as exc:
                logger.error("Error fetching profile: %s", exc)
            try:
                applications = self._fetch_applications(identity)
            except FetchError as exc:
                logger.error("Error fetching applications: %s", exc)

        view = ProfilePageView(
            state=LoadState.READY,
            authenticated=identity is not None,
            form=form,
            applications=applications,
            applications_message=None if applications else NO_APPLICATIONS,
        )
        return self._publish(generation, view)

    def _current_identity(self) -> Identity | None:
        try:
            return self._fetch(self.gateway.current_identity)
        except FetchError as exc:
            logger.error("Error resolving current user: %s", exc)
            return None

    def _fetch_profile(self, identity: Identity) -> ProfileFormValues:
        rows = self._fetch(lambda: self.gateway.profiles.select({"user_id": identity.user_id}))
        if not rows:
            return ProfileFormValues()
        return profile_form_from_row(ProfileRow.model_validate(rows[0]))

    def _fetch_applications(self, identity: Identity) -> list[ApplicationCard]:
        rows = self._fetch(lambda: self.gateway.applications.select(
            filters={"user_id": identity.user_id},
            order_by="created_at",
            descending=True,
            embed={"job": _JOB_SUMMARY},
        ))
        return [application_card(row) for row in rows]

    def submit(self, data: Mapping[str, Any] | None) -> SubmissionView:
        return self._submit(ProfileForm, data, self._save)

    def _save(self, form: ProfileForm) -> SubmissionView:
        identity = self._require_identity(SIGN_IN_TO_EDIT)
        saved = self._write(lambda: self.gateway.profiles.upsert(
            {
                "user_id": identity.user_id,
                "full_name": form.full_name,
                "email": form.email,
                "phone": form.phone,
                "location": form.location,
                "bio": form.bio,
                "skills": split_skills(form.skills),
                "updated_at": utcnow_iso(),
            },
            on_conflict="user_id",
        ))
        values = profile_form_from_row(ProfileRow.model_validate(saved))
        return SubmissionView(state=SubmitState.SUCCESS, values=values.model_dump())
