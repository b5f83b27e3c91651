from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import relationship

from taskrelay.db.base import Base


class Task(Base):
    __tablename__ = 'tasks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True)
    project_id = Column(Integer, ForeignKey('projects.id'), nullable=True)
    name = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="tasks")
    project = relationship("Project", back_populates="tasks")

    # (scope, created_at, id) indexes serve the LATEST ordering
    __table_args__ = (
        Index('ix_tasks_user_created_at_id', 'user_id', 'created_at', 'id'),
        Index('ix_tasks_project_created_at_id', 'project_id', 'created_at', 'id'),
    )
