"""Profile picture — at most one image blob per user."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, LargeBinary

from userstore.infrastructure.database import Base


class ProfilePicture(Base):
    __tablename__ = "profile_pictures"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    filename = Column(String(255), nullable=False)
    content_type = Column(String(100), nullable=False)
    data = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<ProfilePicture {self.user_id} - {self.filename}>"
