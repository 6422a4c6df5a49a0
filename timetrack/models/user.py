from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base

class User(Base):
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    clients = relationship("Client", back_populates="user", passive_deletes=True)
    projects = relationship("Project", back_populates="user", passive_deletes=True)
    time_entries = relationship("TimeEntry", back_populates="user", passive_deletes=True)
