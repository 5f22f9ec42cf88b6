from sqlalchemy import Column, String, Boolean, JSON

from models.base_model import BaseModel, Base

SEO_PAGES = ("home", "solutions", "industries", "case-studies", "company", "contact", "blog")


class PageSEO(BaseModel, Base):
    __tablename__ = "page_seo"

    page = Column(String(50), nullable=False, unique=True, index=True)
    page_title = Column(String(200), nullable=True)
    seo = Column(JSON, nullable=False, default=dict)
    custom_fields = Column(JSON, nullable=False, default=list)  # [{key, value}]
    is_active = Column(Boolean, nullable=False, default=True)
