"""ORM model for registered accounts."""

from sqlalchemy import CheckConstraint, Column, Integer, String

from film_api.models.base import Base


class User(Base):
    """
    Account used for login and role checks.

    username is always stored lowercased, which makes the unique index
    case-insensitive in practice. role is fixed at registration.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role!r}>"
