from app.models.user import User, AuthSession
from app.models.job import Job
from app.models.application import Application
from app.models.profile import Profile

__all__ = ["User", "AuthSession", "Job", "Application", "Profile"]
