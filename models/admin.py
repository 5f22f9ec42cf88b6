from enum import Enum

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.types import Enum as SAEnum

from models.base_model import BaseModel, Base


class AdminRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"


class Admin(BaseModel, Base):
    __tablename__ = "admins"

    email = Column(String(255), nullable=False, unique=True, index=True)  # stored lowercased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    role = Column(
        SAEnum(AdminRole, name="admin_role", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AdminRole.EDITOR,
    )
    avatar = Column(String(512), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime, nullable=True)
    # SHA-256 hex of the plaintext token mailed to the user
    reset_password_token = Column(String(64), nullable=True, index=True)
    reset_password_expire = Column(DateTime, nullable=True)

    @property
    def password(self):
        raise AttributeError("Password: Write-only field")

    @property
    def role_name(self) -> str:
        return self.role.value if isinstance(self.role, AdminRole) else str(self.role)

    def __repr__(self):
        return f"<Admin {self.email} role={self.role_name}>"
