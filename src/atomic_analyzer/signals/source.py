"""Signal sources.

The scoring engine only ever sees a ``SignalSource``. Content sniffing lives
here so the rule sets stay pure functions of ``SiteSignals``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from atomic_analyzer.models.enums import BusinessType
from atomic_analyzer.signals import patterns as p
from atomic_analyzer.signals.models import SiteSignals, SiteSnapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SignalSource(Protocol):
    def collect(self) -> SiteSignals: ...


class StaticSignalSource:
    """Returns a precomputed set of signals on every call."""

    def __init__(self, signals: SiteSignals) -> None:
        self._signals = signals

    def collect(self) -> SiteSignals:
        return self._signals


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(n.lower() in lowered for n in needles)


class SnapshotSignalSource:
    """Derives every signal from a ``SiteSnapshot``.

    Sub-scores are additive point weights capped at 100. ``clock`` supplies
    "now" for the days-since-update signal so tests can pin it.
    """

    def __init__(self, snapshot: SiteSnapshot, clock: Clock | None = None) -> None:
        self.snapshot = snapshot
        self._clock = clock or _utcnow
        self._html = snapshot.homepage_html
        self._integrations = frozenset(snapshot.active_integrations)
        self._pages = frozenset(snapshot.pages)

    def collect(self) -> SiteSignals:
        signals = SiteSignals(
            has_clear_value_proposition=self.value_proposition(),
            economic_values_count=self.economic_values(),
            days_since_last_update=self.days_since_update(),
            has_testing_evidence=self._active(p.TESTING_INTEGRATIONS),
            seo_score=self.seo_setup(),
            posts_last_30_days=max(0, self.snapshot.posts_last_30_days),
            has_email_capture=self.email_capture(),
            social_proof_score=self.social_proof(),
            trust_score=self.trust_signals(),
            has_clear_pricing=self.pricing_clarity(),
            cta_score=self.cta_effectiveness(),
            has_risk_reversal=_contains_any(self._html, p.GUARANTEE_TERMS),
            purchase_barriers_score=self.purchase_barriers(),
            has_systems_documentation=self.systems_documentation(),
            customer_communication_score=self.customer_communication(),
            scalability_score=self.scalability(),
            value_stream_score=self.value_stream(),
            payment_score=self.payment_infrastructure(),
            revenue_streams=self.revenue_streams(),
            pricing_optimization_score=self.pricing_optimization(),
            financial_leverage_score=self.financial_leverage(),
        )
        logger.debug("Collected site signals: %s", signals.model_dump())
        return signals

    # --- helpers ---

    def _active(self, slugs: tuple[str, ...]) -> bool:
        return any(s in self._integrations for s in slugs)

    def _has_page(self, slugs: tuple[str, ...]) -> bool:
        return any(s in self._pages for s in slugs)

    # --- development ---

    def value_proposition(self) -> bool:
        return _contains_any(self._html, p.VALUE_KEYWORDS) and bool(p.HEADLINE_RE.search(self._html))

    def economic_values(self) -> int:
        return sum(
            1 for keywords in p.ECONOMIC_VALUE_KEYWORDS.values() if _contains_any(self._html, keywords)
        )

    def days_since_update(self) -> int:
        last = self.snapshot.last_content_update
        if last is None:
            return 0
        now = self._clock()
        if last.tzinfo is None and now.tzinfo is not None:
            last = last.replace(tzinfo=now.tzinfo)
        elapsed = (now - last).total_seconds() / 86400
        return max(0, math.floor(elapsed + 0.5))

    # --- marketing ---

    def seo_setup(self) -> int:
        score = 0
        if self._active(p.SEO_INTEGRATIONS):
            score += 40
        if self.snapshot.has_sitemap:
            score += 20
        if self.snapshot.has_robots_txt:
            score += 10
        if p.META_DESCRIPTION_RE.search(self._html):
            score += 15
        if len(p.HEADING_TAG_RE.findall(self._html)) >= 3:
            score += 15
        return min(score, 100)

    def email_capture(self) -> bool:
        return _contains_any(self._html, p.EMAIL_CAPTURE_INDICATORS) or self._active(p.EMAIL_INTEGRATIONS)

    def social_proof(self) -> int:
        score = 0
        if p.TESTIMONIAL_RE.search(self._html):
            score += 30
        if _contains_any(self._html, p.TRUST_BADGE_KEYWORDS):
            score += 15
        if p.CLIENT_LOGOS_RE.search(self._html):
            score += 20
        if p.CASE_STUDY_RE.search(self._html):
            score += 20
        if p.REVIEW_COUNT_RE.search(self._html):
            score += 15
        return min(score, 100)

    # --- sales ---

    def trust_signals(self) -> int:
        score = 0
        if self.snapshot.is_ssl:
            score += 30
        if "contact" in self._pages:
            score += 20
        if "about" in self._pages:
            score += 20
        if self.snapshot.has_privacy_policy:
            score += 15
        if p.PHONE_RE.search(self._html):
            score += 15
        return min(score, 100)

    def pricing_clarity(self) -> bool:
        return "pricing" in self._pages or bool(p.PRICING_RE.search(self._html))

    def cta_effectiveness(self) -> int:
        score = min(len(p.CTA_ELEMENT_RE.findall(self._html)) * 20, 40)
        lowered = self._html.lower()
        action_count = sum(1 for w in p.CTA_ACTION_WORDS if w in lowered)
        score += min(action_count * 10, 30)
        position = self._html.find("<button")
        if 0 <= position < p.ABOVE_FOLD_CHARS:
            score += 30
        return min(score, 100)

    def purchase_barriers(self) -> int:
        store = self.snapshot.store
        score = 100
        if store is None:
            return score
        if store.checkout_field_count > 15:
            score -= 30
        elif store.checkout_field_count > 10:
            score -= 15
        if not store.guest_checkout_enabled:
            score -= 20
        if len(store.payment_gateways) < 2:
            score -= 15
        return max(score, 0)

    # --- delivery ---

    def systems_documentation(self) -> bool:
        return self._has_page(p.DOCUMENTATION_PAGES) or self._active(p.KNOWLEDGE_BASE_INTEGRATIONS)

    def customer_communication(self) -> int:
        score = 0
        if self.snapshot.store is not None and self.snapshot.store.order_emails_enabled:
            score += 40
        if self._active(p.CONTACT_FORM_INTEGRATIONS):
            score += 30
        if self._active(p.LIVE_CHAT_INTEGRATIONS):
            score += 30
        return min(score, 100)

    def scalability(self) -> int:
        score = 0
        if self._active(p.CACHE_INTEGRATIONS):
            score += 30
        if self.snapshot.cdn_enabled or self._active(p.CDN_INTEGRATIONS):
            score += 25
        if self._active(p.AUTOMATION_INTEGRATIONS):
            score += 25
        if self.snapshot.autoload_bytes < p.AUTOLOAD_BUDGET_BYTES:
            score += 20
        return min(score, 100)

    def value_stream(self) -> int:
        score = 0
        if self._has_page(p.PROCESS_PAGES):
            score += 40
        if p.PROCESS_TEXT_RE.search(self._html):
            score += 30
        if p.PROCESS_VISUAL_RE.search(self._html):
            score += 30
        return min(score, 100)

    # --- accounting ---

    def payment_infrastructure(self) -> int:
        store = self.snapshot.store
        if store is not None:
            score = min(len(store.payment_gateways) * 25, 100)
            for gateway in store.payment_gateways:
                if gateway in p.PREFERRED_GATEWAYS:
                    score = min(score + 10, 100)
            return score
        score = sum(50 for slug in p.PAYMENT_INTEGRATIONS if slug in self._integrations)
        return min(score, 100)

    def revenue_streams(self) -> int:
        streams = 0
        store = self.snapshot.store
        if store is not None:
            if store.product_count > 0:
                streams += 1
            if store.subscriptions_enabled:
                streams += 1
        if self._active(p.MEMBERSHIP_INTEGRATIONS):
            streams += 1
        if self._active(p.BOOKING_INTEGRATIONS):
            streams += 1
        if p.AD_NETWORK_RE.search(self._html):
            streams += 1
        return streams

    def pricing_optimization(self) -> int:
        score = 0
        if p.PRICING_TABLE_RE.search(self._html):
            score += 40
        if len(p.DOLLAR_AMOUNT_RE.findall(self._html)) >= 3:
            score += 30
        if _contains_any(self._html, p.VALUE_TERMS):
            score += 10
        if _contains_any(self._html, p.URGENCY_TERMS):
            score += 20
        return min(score, 100)

    def financial_leverage(self) -> int:
        score = 0
        if self.snapshot.store is not None and self.snapshot.store.products_with_upsells > 0:
            score += 30
        if self._active(p.EMAIL_AUTOMATION_INTEGRATIONS):
            score += 35
        if self._active(p.AFFILIATE_INTEGRATIONS):
            score += 35
        return min(score, 100)


def detect_business_type(snapshot: SiteSnapshot) -> BusinessType:
    """Guess the business type from store presence, integrations and copy."""
    integrations = set(snapshot.active_integrations)
    if snapshot.store is not None:
        return BusinessType.ECOMMERCE
    if integrations & {"memberpress", "paid-memberships-pro"}:
        return BusinessType.MEMBERSHIP
    if "bookly-responsive-appointment-booking-tool" in integrations:
        return BusinessType.SERVICE
    if integrations & set(p.COURSE_INTEGRATIONS):
        return BusinessType.EDUCATION
    html = snapshot.homepage_html
    if p.SAAS_RE.search(html):
        return BusinessType.SAAS
    if p.AGENCY_RE.search(html):
        return BusinessType.AGENCY
    if p.NONPROFIT_RE.search(html):
        return BusinessType.NONPROFIT
    return BusinessType.OTHER
