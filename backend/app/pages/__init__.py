from app.pages.apply_job import ApplyJobPage
from app.pages.jobs_listing import JobsListingPage
from app.pages.post_job import PostJobPage
from app.pages.profile import ProfilePage

__all__ = ["ApplyJobPage", "JobsListingPage", "PostJobPage", "ProfilePage"]
