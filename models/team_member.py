from sqlalchemy import Column, String, Integer, Text

from models.base_model import BaseModel, Base


class TeamMember(BaseModel, Base):
    __tablename__ = "team_members"

    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    bio = Column(Text, nullable=True)
    image = Column(String(512), nullable=True)
    linkedin = Column(String(512), nullable=True)
    twitter = Column(String(512), nullable=True)
    email = Column(String(255), nullable=True)
    order = Column("sort_order", Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="active")  # active | inactive
