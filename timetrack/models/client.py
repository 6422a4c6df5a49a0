from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base


class Client(Base):
    """
    Represents clients a freelancer works for.
    Each client belongs to exactly one user; deleting it removes its projects
    and their time entries through the foreign key cascade.
    """
    __tablename__ = "clients"
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    user = relationship("User", back_populates="clients")
    projects = relationship(
        "Project",
        back_populates="client",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
