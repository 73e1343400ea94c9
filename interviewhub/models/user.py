# interviewhub/models/user.py
# users registered through the identity provider + the first-admin bootstrap marker
from sqlalchemy import Column, String, DateTime, Enum, BigInteger, ForeignKey
from interviewhub.db.base import Base, BigIntPK, utcnow

ROLES = ("candidate", "interviewer", "admin")


class User(Base):
    __tablename__ = "users"

    id = Column(BigIntPK, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    external_id = Column(String(255), unique=True, index=True, nullable=False)  # token sub
    image = Column(String(500), nullable=True)
    role = Column(
        Enum(*ROLES, name="user_role", native_enum=False),
        nullable=False,
        default="candidate",
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)


class SystemBootstrap(Base):
    """Single-row markers; the primary key makes the claim atomic."""
    __tablename__ = "system_bootstrap"

    key = Column(String(50), primary_key=True)
    user_id = Column(BigInteger, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
