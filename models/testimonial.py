from sqlalchemy import Column, String, Integer, Boolean, CheckConstraint

from models.base_model import BaseModel, Base


class Testimonial(BaseModel, Base):
    __tablename__ = "testimonials"

    quote = Column(String(1000), nullable=False)
    author = Column(String(100), nullable=False)
    designation = Column(String(100), nullable=True)
    company = Column(String(100), nullable=True)
    avatar = Column(String(512), nullable=True)
    rating = Column(Integer, nullable=False, default=5)
    featured = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default="active")  # active | inactive
    order = Column("sort_order", Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_testimonials_rating_range"),
    )
