from sqlalchemy import JSON, Column, ForeignKey, Text
from app.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Text, primary_key=True)
    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text)
    location = Column(Text)
    bio = Column(Text)
    skills = Column(JSON)
    experience = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)
