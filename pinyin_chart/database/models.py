"""
SQLAlchemy models for the review-choice store
"""

from sqlalchemy import Column, String, Text, DateTime, CheckConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

REVIEW_ACTIONS = ('new', 'old', 'custom')


class ReviewChoice(Base):
    """Decision taken on one reviewed syllable (keyed "<initial>-<final>-<tone>")"""
    __tablename__ = 'review_choices'

    key = Column(String, primary_key=True)
    action = Column(String, nullable=False, default='new')  # 'new', 'old' or 'custom'
    custom_value = Column(Text)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("action IN ('new', 'old', 'custom')", name='ck_review_action'),
    )

    def to_dict(self):
        data = {'action': self.action}
        if self.custom_value is not None:
            data['custom_value'] = self.custom_value
        return data

    def __repr__(self):
        return f"<ReviewChoice(key='{self.key}', action='{self.action}')>"
