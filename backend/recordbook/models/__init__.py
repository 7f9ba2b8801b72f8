"""ORM Models: the three tables behind the synchronized collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table names equal EntityKind values
    - records.user_id / records.category_id are plain foreign keys (no cascade):
      deleting a referenced row is rejected by the store

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before any query runs
"""

from recordbook.models.user import User  # noqa: F401
from recordbook.models.category import Category  # noqa: F401
from recordbook.models.record import Record  # noqa: F401
