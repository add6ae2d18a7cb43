"""
IdeaBoard – SQLAlchemy ORM models package.

Imports all model classes so Alembic and the app can discover them
through a single ``import ideaboard.models``.
"""

from ideaboard.models.user import User              # noqa: F401
from ideaboard.models.idea import Idea              # noqa: F401
from ideaboard.models.comment import Comment        # noqa: F401
from ideaboard.models.feedback import Feedback      # noqa: F401
