"""String enums for departments, severities, business types and webhook events."""

from enum import StrEnum


class Department(StrEnum):
    """The five fixed business departments, in scoring order."""

    DEVELOPMENT = "development"
    MARKETING = "marketing"
    SALES = "sales"
    DELIVERY = "delivery"
    ACCOUNTING = "accounting"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Severity(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Level(StrEnum):
    """Impact / effort rating attached to opportunities."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BusinessType(StrEnum):
    ECOMMERCE = "ecommerce"
    MEMBERSHIP = "membership"
    SERVICE = "service"
    EDUCATION = "education"
    SAAS = "saas"
    AGENCY = "agency"
    NONPROFIT = "nonprofit"
    OTHER = "other"


class TriggerEvent(StrEnum):
    """Moments at which webhooks may fire."""

    ANALYSIS_COMPLETE = "analysis_complete"
    CRITICAL_ISSUE_FOUND = "critical_issue_found"
    SCORE_IMPROVED = "score_improved"
    SCORE_DECLINED = "score_declined"
    PDF_GENERATED = "pdf_generated"
    PROCESS_DOCS_CREATED = "process_docs_created"


class DestinationFamily(StrEnum):
    """Webhook destination families that receive a reshaped body."""

    SLACK = "slack"
    DISCORD = "discord"
    GENERIC = "generic"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


DEPARTMENT_ORDER: tuple[Department, ...] = tuple(Department)
