"""ORM Models: SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all runs
"""

from newsletter.models.subscription import Subscription  # noqa: F401
