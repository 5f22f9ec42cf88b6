from sqlalchemy import Column, String, Integer, Boolean

from models.base_model import BaseModel, Base


class Client(BaseModel, Base):
    """Client logo shown in the site's "trusted by" strip."""
    __tablename__ = "clients"

    name = Column(String(100), nullable=False)
    logo = Column(String(512), nullable=False)
    logo_dark = Column(String(512), nullable=True)
    website = Column(String(512), nullable=True)
    industry = Column(String(100), nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default="active")  # active | inactive
    order = Column("sort_order", Integer, nullable=False, default=0)
