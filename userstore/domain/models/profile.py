"""Profile domain model — maps to the 'profiles' table (1:1 with users)."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from userstore.infrastructure.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(20), unique=True, nullable=True)

    # Denormalized copy of users.email
    email = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Profile {self.user_id} - {self.first_name} {self.last_name}>"
