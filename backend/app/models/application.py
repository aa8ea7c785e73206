from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.database import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(Text, primary_key=True)
    job_id = Column(Text, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    status = Column(Text, nullable=False, default="pending")
    created_at = Column(Text, nullable=False)
    resume_url = Column(Text)
    cover_letter = Column(Text)

    job = relationship("Job", back_populates="applications")
