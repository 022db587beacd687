"""
Review-choice store (SQLAlchemy)
"""

from .db import get_db, get_db_session, init_db
from .models import Base, ReviewChoice
from .services import ReviewChoiceService

__all__ = [
    'Base',
    'ReviewChoice',
    'ReviewChoiceService',
    'get_db',
    'get_db_session',
    'init_db',
]
