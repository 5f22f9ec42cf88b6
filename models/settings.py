"""
Settings model: a single row holding site-wide configuration.

Grouped values (contact info, social links, hero, footer, business info, seo,
tracking) are JSON objects merged key-by-key on update.
"""
from sqlalchemy import Column, String, Text, Boolean, JSON

from models.base_model import BaseModel, Base

DEFAULT_SETTINGS = {
    "site_name": "Growth Valley",
    "site_tagline": "Predictable Revenue Systems for Scalable Businesses",
    "site_description": "Growth Valley helps B2B companies build predictable revenue systems.",
    "contact_info": {"email": "hello@growthvalley.com", "phone": "", "address": "Nashik, Maharashtra, India"},
    "social_links": {"linkedin": "", "twitter": "", "facebook": "", "instagram": "", "youtube": ""},
    "hero": {"title": "", "subtitle": "", "ctaText": "Schedule a Call", "ctaLink": "/contact"},
    "footer": {"description": "", "copyright": "Growth Valley. All rights reserved."},
    "business_info": {"companyName": "Growth Valley", "registrationNumber": "", "taxId": ""},
    "seo": {"metaTitle": "", "metaDescription": "", "keywords": [], "ogImage": ""},
    "tracking": {"googleAnalyticsId": "", "googleTagManagerId": "", "facebookPixelId": ""},
}

JSON_GROUPS = ("contact_info", "social_links", "hero", "footer", "business_info", "seo", "tracking")


class Settings(BaseModel, Base):
    __tablename__ = "settings"

    site_name = Column(String(100), nullable=False, default="Growth Valley")
    site_tagline = Column(String(255), nullable=True)
    site_description = Column(Text, nullable=True)
    contact_info = Column(JSON, nullable=False, default=dict)
    social_links = Column(JSON, nullable=False, default=dict)
    hero = Column(JSON, nullable=False, default=dict)
    footer = Column(JSON, nullable=False, default=dict)
    business_info = Column(JSON, nullable=False, default=dict)
    seo = Column(JSON, nullable=False, default=dict)
    tracking = Column(JSON, nullable=False, default=dict)
    custom_css = Column(Text, nullable=True)
    custom_js = Column(Text, nullable=True)
    maintenance_mode = Column(Boolean, nullable=False, default=False)
