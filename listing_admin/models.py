from sqlalchemy import Column, Integer, String, Text

from .database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(180), nullable=False)
    name_en = Column(String(180), nullable=True)
    slug = Column(String(180), nullable=True, index=True)
    status = Column(String(32), default="draft", index=True)  # draft, published, archived
    description = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    price_currency = Column(String(8), default="AED")

    # Free-form JSON documents, stored as text. Shapes vary between record generations.
    highlights_json = Column(Text, nullable=True)
    amenities_json = Column(Text, nullable=True)
    payment_plan_json = Column(Text, nullable=True)
    payment_plans_json = Column(Text, nullable=True)
    faqs_json = Column(Text, nullable=True)
    neighborhood_json = Column(Text, nullable=True)
    units_json = Column(Text, nullable=True)
    floor_plans_json = Column(Text, nullable=True)

    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
