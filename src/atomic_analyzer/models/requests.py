"""Request bodies for the HTTP surface."""

from pydantic import BaseModel, ConfigDict, Field

from atomic_analyzer.models.enums import BusinessType, Department, HttpMethod, TriggerEvent
from atomic_analyzer.signals.models import SiteSignals, SiteSnapshot


class AnalysisRequest(BaseModel):
    """Either precomputed ``signals`` or a raw ``snapshot`` to collect from."""

    model_config = ConfigDict(extra="forbid")

    business_type: BusinessType | None = None
    signals: SiteSignals | None = None
    snapshot: SiteSnapshot | None = None


class WebhookToggleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    is_active: bool | None = None


class WebhookRequest(BaseModel):
    """Create or update payload. URL and trigger are checked by the service."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field("", max_length=100)
    url: str = Field("", max_length=500)
    trigger_event: TriggerEvent | str = ""
    method: HttpMethod = HttpMethod.POST
    custom_headers: dict[str, str] = Field(default_factory=dict)
    is_active: bool = True


class ProcessDocsRequest(BaseModel):
    """Departments to document. Empty means every department in the latest run."""

    model_config = ConfigDict(extra="forbid")

    departments: list[Department] = Field(default_factory=list)
