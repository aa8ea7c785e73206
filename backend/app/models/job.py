from sqlalchemy import Column, Text
from sqlalchemy.orm import relationship
from app.database import Base

JOB_TYPES = ("Full-time", "Part-time", "Contract", "Internship")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    salary_range = Column(Text)
    type = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)
    deadline = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="active")

    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
