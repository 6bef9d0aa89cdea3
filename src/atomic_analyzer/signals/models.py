"""Signal and site snapshot models.

``SiteSignals`` is everything the department rules read. ``SiteSnapshot`` is
the raw site state a collector turns into signals.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SiteSignals(BaseModel):
    """Opaque facts consumed by the scoring rules."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Development
    has_clear_value_proposition: bool = False
    economic_values_count: int = Field(0, ge=0, le=9)
    days_since_last_update: int = Field(0, ge=0)
    has_testing_evidence: bool = False

    # Marketing
    seo_score: int = Field(0, ge=0, le=100)
    posts_last_30_days: int = Field(0, ge=0)
    has_email_capture: bool = False
    social_proof_score: int = Field(0, ge=0, le=100)

    # Sales
    trust_score: int = Field(0, ge=0, le=100)
    has_clear_pricing: bool = False
    cta_score: int = Field(0, ge=0, le=100)
    has_risk_reversal: bool = False
    purchase_barriers_score: int = Field(100, ge=0, le=100)

    # Delivery
    has_systems_documentation: bool = False
    customer_communication_score: int = Field(0, ge=0, le=100)
    scalability_score: int = Field(0, ge=0, le=100)
    value_stream_score: int = Field(0, ge=0, le=100)

    # Accounting
    payment_score: int = Field(0, ge=0, le=100)
    revenue_streams: int = Field(0, ge=0)
    pricing_optimization_score: int = Field(0, ge=0, le=100)
    financial_leverage_score: int = Field(0, ge=0, le=100)


class StoreSnapshot(BaseModel):
    """Store configuration, present only when the site sells online."""

    model_config = ConfigDict(extra="forbid")

    product_count: int = 0
    checkout_field_count: int = 0
    guest_checkout_enabled: bool = True
    payment_gateways: list[str] = Field(default_factory=list)
    order_emails_enabled: bool = False
    subscriptions_enabled: bool = False
    products_with_upsells: int = 0


class SiteSnapshot(BaseModel):
    """Raw site state handed to a collector."""

    model_config = ConfigDict(extra="forbid")

    homepage_html: str = ""
    active_integrations: list[str] = Field(default_factory=list)
    pages: list[str] = Field(default_factory=list)
    posts_last_30_days: int = 0
    last_content_update: datetime | None = None
    is_ssl: bool = False
    has_privacy_policy: bool = False
    has_sitemap: bool = False
    has_robots_txt: bool = False
    cdn_enabled: bool = False
    autoload_bytes: int = 0
    store: StoreSnapshot | None = None
