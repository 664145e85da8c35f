"""ORM Models — SQLAlchemy declarative models for every inventory table.

Invariants:
    - All models inherit from Base and RecordMixin (db/base.py)
    - Column names equal the matching Entity Record field names

Design Decisions:
    - One file per concern; closely related kinds (statuses, groups) share a file
    - All models imported here so Base.metadata is complete before create_all or alembic runs
"""

from apm.models.entity import Entity  # noqa: F401
from apm.models.software import Software  # noqa: F401
from apm.models.stakeholder import Stakeholder  # noqa: F401
from apm.models.status import Status, StatusLog  # noqa: F401
from apm.models.rank import Rank  # noqa: F401
from apm.models.news_article import NewsArticle  # noqa: F401
from apm.models.media import Media  # noqa: F401
from apm.models.product_documentation import ProductDocumentation  # noqa: F401
from apm.models.groups import UserGroup, SoftwareGroup, FunctionalCategory  # noqa: F401
from apm.models.log import Log  # noqa: F401
from apm.models.user import User  # noqa: F401
