"""
Database service layer for review choices
"""

import logging
from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from .models import REVIEW_ACTIONS, ReviewChoice

logger = logging.getLogger(__name__)


class ReviewChoiceService:
    """Service for review choice operations"""

    @staticmethod
    def get_all(db: Session) -> List[ReviewChoice]:
        """Get all choices, ordered by key"""
        return db.query(ReviewChoice).order_by(ReviewChoice.key).all()

    @staticmethod
    def get_by_key(db: Session, key: str) -> Optional[ReviewChoice]:
        return db.query(ReviewChoice).filter(ReviewChoice.key == key).first()

    @staticmethod
    def set_action(db: Session, key: str, action: str) -> ReviewChoice:
        """
        Record which value to keep for a syllable.

        Raises ValueError for an action other than new/old/custom. A stored
        custom value is kept so switching back to 'custom' restores it.
        """
        if action not in REVIEW_ACTIONS:
            raise ValueError(f"Invalid review action: {action!r}")

        choice = ReviewChoiceService.get_by_key(db, key)
        if choice is None:
            choice = ReviewChoice(key=key, action=action)
            db.add(choice)
        else:
            choice.action = action
        db.commit()
        db.refresh(choice)
        logger.debug(f"Review choice {key} -> {action}")
        return choice

    @staticmethod
    def set_custom_value(db: Session, key: str, value: str) -> ReviewChoice:
        """Store a hand-written value; the action becomes 'custom'."""
        choice = ReviewChoiceService.get_by_key(db, key)
        if choice is None:
            choice = ReviewChoice(key=key, action='custom', custom_value=value)
            db.add(choice)
        else:
            choice.action = 'custom'
            choice.custom_value = value
        db.commit()
        db.refresh(choice)
        logger.debug(f"Review choice {key} -> custom")
        return choice

    @staticmethod
    def delete(db: Session, key: str) -> bool:
        choice = ReviewChoiceService.get_by_key(db, key)
        if choice is None:
            return False
        db.delete(choice)
        db.commit()
        return True

    @staticmethod
    def export(db: Session) -> Dict[str, Dict[str, str]]:
        """All decisions except 'new' (keep current output), keyed by review key."""
        return {
            choice.key: choice.to_dict()
            for choice in ReviewChoiceService.get_all(db)
            if choice.action != 'new'
        }
