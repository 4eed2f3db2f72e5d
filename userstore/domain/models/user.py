"""Account domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String

from userstore.infrastructure.database import Base

DEFAULT_ROLE = "USER"


class Account(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default=DEFAULT_ROLE)

    def __repr__(self):
        return f"<Account {self.email}>"
