# backend/models/users.py
from sqlalchemy import Column, Integer, String
from database import Base

# Represents a POS operator account.
# Passwords are stored and compared as plain text.
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
