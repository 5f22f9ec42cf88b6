"""
Enquiry model: a contact-form submission tracked through a simple sales pipeline.

Notes are append-only rows in `enquiry_notes`; they are removed together with
their enquiry.
"""
from enum import Enum

from sqlalchemy import Column, String, Text, Numeric, JSON, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from sqlalchemy.types import Enum as SAEnum

from models.base_model import BaseModel, Base


class EnquiryStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    CLOSED = "closed"
    LOST = "lost"


class EnquiryPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


SERVICES = (
    "Lead Generation",
    "Marketing Automation",
    "CRM Implementation",
    "Sales Funnel Optimization",
    "Growth Consulting",
    "Other",
)

SOURCES = ("website", "referral", "social", "direct", "other")


def _values(e):
    return [m.value for m in e]


class Enquiry(BaseModel, Base):
    __tablename__ = "enquiries"

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    company = Column(String(100), nullable=True)
    service = Column(String(50), nullable=True)
    message = Column(String(2000), nullable=False)
    source = Column(String(20), nullable=False, default="website")
    status = Column(
        SAEnum(EnquiryStatus, name="enquiry_status", native_enum=False, values_callable=_values),
        nullable=False,
        default=EnquiryStatus.NEW,
    )
    priority = Column(
        SAEnum(EnquiryPriority, name="enquiry_priority", native_enum=False, values_callable=_values),
        nullable=False,
        default=EnquiryPriority.MEDIUM,
    )
    assigned_to = Column(String(36), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    estimated_value = Column(Numeric(12, 2), nullable=True)
    tags = Column(JSON, nullable=False, default=list)

    assignee = relationship("Admin")
    notes = relationship(
        "EnquiryNote",
        back_populates="enquiry",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EnquiryNote.created_at",
    )

    __table_args__ = (
        Index("ix_enquiries_status_created_at", "status", "created_at"),
    )


class EnquiryNote(BaseModel, Base):
    __tablename__ = "enquiry_notes"

    enquiry_id = Column(String(36), ForeignKey("enquiries.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_by = Column(String(36), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    enquiry = relationship("Enquiry", back_populates="notes")
    author = relationship("Admin")
