"""
UserPreferences model - one development-environment profile per user
"""
import enum
from sqlalchemy import Column, Integer, String, TIMESTAMP, Enum, ForeignKey
from sqlalchemy.orm import relationship
from courseware.database import Base
from courseware.utils.clock import utcnow


class OperatingSystem(str, enum.Enum):
    MAC = "MAC"
    WINDOWS = "WINDOWS"
    LINUX = "LINUX"
    WINDOWS_WSL2 = "WINDOWS_WSL2"


class BuildTool(str, enum.Enum):
    MAVEN = "MAVEN"
    GRADLE = "GRADLE"


class IDE(str, enum.Enum):
    INTELLIJ_IDEA = "INTELLIJ_IDEA"
    VS_CODE = "VS_CODE"
    ECLIPSE = "ECLIPSE"
    NETBEANS = "NETBEANS"


class UserPreferences(Base):
    """
    User preferences table - upserted, at most one row per user
    """
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    operating_system = Column(Enum(OperatingSystem, name="operating_system"), nullable=False)
    build_tool = Column(Enum(BuildTool, name="build_tool"), nullable=False)
    java_version = Column(String(20), nullable=False)
    ide = Column(Enum(IDE, name="ide"), nullable=False)
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="preferences")

    def __repr__(self):
        return (
            f"<UserPreferences(user_id={self.user_id}, os={self.operating_system}, "
            f"build_tool={self.build_tool}, ide={self.ide})>"
        )
