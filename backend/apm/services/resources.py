"""Resource Definitions — the per-kind bundle that parameterizes repository, service and router.

Invariants:
    - One definition per entity kind; COLLECTIONS holds the thirteen mounted under /api/v1
    - USERS has no collection path and no update schema: users are created by the
      startup bootstrap and read by login only
    - Paths are unique; among COLLECTIONS update_schema is None exactly for logs
    - Operation descriptions ("Failed to create software", ...) derive from the labels here
"""

from dataclasses import dataclass

from pydantic import BaseModel

from apm.core import records
from apm.db.base import Base
from apm import models
from apm.schemas import content, inventory, people, status


@dataclass(frozen=True)
class ResourceDefinition:
    """Types and wording for one entity kind."""
    name: str
    path: str | None
    label: str
    singular: str
    plural: str
    model: type[Base]
    record: type[records.Record]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel] | None
    response_schema: type[BaseModel]

    @property
    def supports_update(self) -> bool:
        return self.update_schema is not None

    def describe_failure(self, operation: str) -> str:
        """Fixed human-readable description for a failed operation."""
        if operation == "get":
            return f"{self.label} not found"
        if operation == "list":
            return f"Failed to retrieve {self.plural}"
        return f"Failed to {operation} {self.singular}"


ENTITIES = ResourceDefinition(
    name="entities", path="/entities",
    label="Entity", singular="entity", plural="entities",
    model=models.Entity, record=records.EntityRecord,
    create_schema=inventory.EntityCreate,
    update_schema=inventory.EntityUpdate,
    response_schema=inventory.EntityResponse,
)

SOFTWARE = ResourceDefinition(
    name="software", path="/software",
    label="Software", singular="software", plural="software list",
    model=models.Software, record=records.SoftwareRecord,
    create_schema=inventory.SoftwareCreate,
    update_schema=inventory.SoftwareUpdate,
    response_schema=inventory.SoftwareResponse,
)

STAKEHOLDERS = ResourceDefinition(
    name="stakeholders", path="/stakeholders",
    label="Stakeholder", singular="stakeholder", plural="stakeholders",
    model=models.Stakeholder, record=records.StakeholderRecord,
    create_schema=people.StakeholderCreate,
    update_schema=people.StakeholderUpdate,
    response_schema=people.StakeholderResponse,
)

STATUSES = ResourceDefinition(
    name="statuses", path="/statuses",
    label="Status", singular="status", plural="statuses",
    model=models.Status, record=records.StatusRecord,
    create_schema=status.StatusCreate,
    update_schema=status.StatusUpdate,
    response_schema=status.StatusResponse,
)

STATUS_LOGS = ResourceDefinition(
    name="status_logs", path="/status-logs",
    label="Status log", singular="status log", plural="status logs",
    model=models.StatusLog, record=records.StatusLogRecord,
    create_schema=status.StatusLogCreate,
    update_schema=status.StatusLogUpdate,
    response_schema=status.StatusLogResponse,
)

RANKS = ResourceDefinition(
    name="ranks", path="/ranks",
    label="Rank", singular="rank", plural="ranks",
    model=models.Rank, record=records.RankRecord,
    create_schema=inventory.RankCreate,
    update_schema=inventory.RankUpdate,
    response_schema=inventory.RankResponse,
)

NEWS_ARTICLES = ResourceDefinition(
    name="news_articles", path="/news",
    label="News article", singular="news article", plural="news articles",
    model=models.NewsArticle, record=records.NewsArticleRecord,
    create_schema=content.NewsArticleCreate,
    update_schema=content.NewsArticleUpdate,
    response_schema=content.NewsArticleResponse,
)

MEDIA = ResourceDefinition(
    name="media", path="/media",
    label="Media", singular="media", plural="media list",
    model=models.Media, record=records.MediaRecord,
    create_schema=content.MediaCreate,
    update_schema=content.MediaUpdate,
    response_schema=content.MediaResponse,
)

PRODUCT_DOCUMENTATION = ResourceDefinition(
    name="product_documentation", path="/product-documentation",
    label="Product documentation", singular="product documentation",
    plural="product documentation list",
    model=models.ProductDocumentation, record=records.ProductDocumentationRecord,
    create_schema=content.ProductDocumentationCreate,
    update_schema=content.ProductDocumentationUpdate,
    response_schema=content.ProductDocumentationResponse,
)

USER_GROUPS = ResourceDefinition(
    name="user_groups", path="/user-groups",
    label="User group", singular="user group", plural="user groups",
    model=models.UserGroup, record=records.UserGroupRecord,
    create_schema=people.UserGroupCreate,
    update_schema=people.UserGroupUpdate,
    response_schema=people.UserGroupResponse,
)

SOFTWARE_GROUPS = ResourceDefinition(
    name="software_groups", path="/software-groups",
    label="Software group", singular="software group", plural="software groups",
    model=models.SoftwareGroup, record=records.SoftwareGroupRecord,
    create_schema=inventory.SoftwareGroupCreate,
    update_schema=inventory.SoftwareGroupUpdate,
    response_schema=inventory.SoftwareGroupResponse,
)

FUNCTIONAL_CATEGORIES = ResourceDefinition(
    name="functional_categories", path="/functional-categories",
    label="Functional category", singular="functional category",
    plural="functional categories",
    model=models.FunctionalCategory, record=records.FunctionalCategoryRecord,
    create_schema=inventory.FunctionalCategoryCreate,
    update_schema=inventory.FunctionalCategoryUpdate,
    response_schema=inventory.FunctionalCategoryResponse,
)

LOGS = ResourceDefinition(
    name="logs", path="/logs",
    label="Log", singular="log", plural="logs",
    model=models.Log, record=records.LogRecord,
    create_schema=status.LogCreate,
    update_schema=None,
    response_schema=status.LogResponse,
)

USERS = ResourceDefinition(
    name="users", path=None,
    label="User", singular="user", plural="users",
    model=models.User, record=records.UserRecord,
    create_schema=people.UserCreate,
    update_schema=None,
    response_schema=people.UserResponse,
)

# Mount order under /api/v1
COLLECTIONS: tuple[ResourceDefinition, ...] = (
    USER_GROUPS,
    STAKEHOLDERS,
    ENTITIES,
    SOFTWARE,
    FUNCTIONAL_CATEGORIES,
    SOFTWARE_GROUPS,
    STATUSES,
    STATUS_LOGS,
    RANKS,
    NEWS_ARTICLES,
    MEDIA,
    PRODUCT_DOCUMENTATION,
    LOGS,
)
