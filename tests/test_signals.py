"""Tests for snapshot signal collection and business type detection."""

from datetime import timedelta

from atomic_analyzer.models.enums import BusinessType
from atomic_analyzer.signals.models import SiteSnapshot, StoreSnapshot
from atomic_analyzer.signals.source import SnapshotSignalSource, StaticSignalSource, detect_business_type

from conftest import FIXED_NOW, fixed_clock

HOMEPAGE = """
<html><head><meta name="description" content="Coaching that works"></head>
<body>
<h1>We help founders transform their sales</h1>
<h2>Fast, reliable and easy</h2>
<h3>Testimonials</h3>
<p>Trusted by 500 customers. Read a case study.</p>
<button>Get started</button>
<p>Call 555-123-4567. 30-day money back guarantee.</p>
<form><input type="email" name="email"></form>
</body></html>
"""


def _collect(snapshot: SiteSnapshot):
    return SnapshotSignalSource(snapshot, clock=fixed_clock).collect()


def test_static_source_returns_given_signals(healthy_signals):
    assert StaticSignalSource(healthy_signals).collect() is healthy_signals


def test_homepage_content_signals():
    signals = _collect(SiteSnapshot(homepage_html=HOMEPAGE))

    assert signals.has_clear_value_proposition is True
    assert signals.has_email_capture is True
    assert signals.has_risk_reversal is True
    # efficacy (works), speed (fast), reliability (reliable), ease (easy)
    assert signals.economic_values_count == 4


def test_value_proposition_needs_a_headline():
    signals = _collect(SiteSnapshot(homepage_html="<p>We help you improve</p>"))
    assert signals.has_clear_value_proposition is False


def test_seo_score_weights():
    snapshot = SiteSnapshot(
        homepage_html=HOMEPAGE,
        active_integrations=["wordpress-seo"],
        has_sitemap=True,
        has_robots_txt=True,
    )
    assert _collect(snapshot).seo_score == 100

    assert _collect(SiteSnapshot(has_sitemap=True, has_robots_txt=True)).seo_score == 30


def test_trust_score_weights():
    snapshot = SiteSnapshot(
        homepage_html="Call 555-123-4567",
        pages=["contact", "about"],
        is_ssl=True,
        has_privacy_policy=True,
    )
    assert _collect(snapshot).trust_score == 100
    assert _collect(SiteSnapshot(is_ssl=True, pages=["about"])).trust_score == 50


def test_days_since_update_rounds_to_nearest_day():
    snapshot = SiteSnapshot(last_content_update=FIXED_NOW - timedelta(days=10, hours=13))
    assert _collect(snapshot).days_since_last_update == 11

    snapshot = SiteSnapshot(last_content_update=FIXED_NOW - timedelta(days=10, hours=11))
    assert _collect(snapshot).days_since_last_update == 10


def test_days_since_update_never_negative():
    snapshot = SiteSnapshot(last_content_update=FIXED_NOW + timedelta(days=2))
    assert _collect(snapshot).days_since_last_update == 0


def test_purchase_barriers_without_store_is_perfect():
    assert _collect(SiteSnapshot()).purchase_barriers_score == 100


def test_purchase_barriers_with_store():
    store = StoreSnapshot(checkout_field_count=16, guest_checkout_enabled=False, payment_gateways=["stripe"])
    # 100 - 30 (fields) - 20 (no guest checkout) - 15 (single gateway)
    assert _collect(SiteSnapshot(store=store)).purchase_barriers_score == 35


def test_store_payment_and_revenue_signals():
    store = StoreSnapshot(
        product_count=12,
        subscriptions_enabled=True,
        payment_gateways=["stripe", "paypal", "cod"],
        products_with_upsells=3,
    )
    snapshot = SiteSnapshot(store=store, active_integrations=["memberpress", "automatewoo"])
    signals = _collect(snapshot)

    # 3 gateways * 25 = 75, plus 10 per preferred gateway capped at 100
    assert signals.payment_score == 95
    # products, subscriptions, membership plugin
    assert signals.revenue_streams == 3
    # upsells 30 + email automation 35
    assert signals.financial_leverage_score == 65


def test_payment_score_from_plugins_without_store():
    snapshot = SiteSnapshot(active_integrations=["woocommerce-gateway-stripe"])
    assert _collect(snapshot).payment_score == 50


def test_scalability_weights():
    snapshot = SiteSnapshot(
        active_integrations=["wp-rocket", "automatewoo"],
        cdn_enabled=True,
        autoload_bytes=10_000,
    )
    assert _collect(snapshot).scalability_score == 100
    assert _collect(SiteSnapshot(autoload_bytes=5_000_000)).scalability_score == 0


def test_detect_business_type_prefers_store():
    snapshot = SiteSnapshot(store=StoreSnapshot(), homepage_html="Our SaaS platform")
    assert detect_business_type(snapshot) == BusinessType.ECOMMERCE


def test_detect_business_type_from_integrations():
    assert detect_business_type(SiteSnapshot(active_integrations=["memberpress"])) == BusinessType.MEMBERSHIP
    assert (
        detect_business_type(SiteSnapshot(active_integrations=["bookly-responsive-appointment-booking-tool"]))
        == BusinessType.SERVICE
    )
    assert detect_business_type(SiteSnapshot(active_integrations=["learnpress"])) == BusinessType.EDUCATION


def test_detect_business_type_from_copy():
    assert detect_business_type(SiteSnapshot(homepage_html="Cloud software for teams")) == BusinessType.SAAS
    assert detect_business_type(SiteSnapshot(homepage_html="A creative agency")) == BusinessType.AGENCY
    assert detect_business_type(SiteSnapshot(homepage_html="Donate to our charity")) == BusinessType.NONPROFIT
    assert detect_business_type(SiteSnapshot(homepage_html="Hello world")) == BusinessType.OTHER
