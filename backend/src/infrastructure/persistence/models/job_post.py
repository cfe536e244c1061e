"""
JobPost Model (Persistence)
Job posts created by employers and moderated by admins.
"""
from sqlalchemy import Column, String, Integer, DateTime, Text, Boolean, Index
from sqlalchemy.sql import func

from core.database import Base
from domain.value_objects import DbJobStatus


class JobPostModel(Base):
    __tablename__ = "job_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employer_id = Column(Integer, nullable=False, index=True)
    job_code = Column(String(32), nullable=False, unique=True)

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    min_qualification = Column(Text, nullable=False)
    experience_required = Column(Text, nullable=True)
    skills = Column(Text, nullable=False)
    responsibilities = Column(Text, nullable=False)
    salary_range = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    vacancy = Column(Integer, default=1)

    # Lifecycle: job_status is authoritative, deleted is an independent soft-delete flag
    job_status = Column(String(20), nullable=False, default=DbJobStatus.PENDING.value)
    deleted = Column(Boolean, nullable=False, default=False)
    on_hold = Column(Boolean, nullable=False, default=False)

    applications_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_job_posts_status_deleted", "job_status", "deleted"),
    )

    def __repr__(self):
        return f"<JobPostModel {self.job_code} {self.title} [{self.job_status}]>"
