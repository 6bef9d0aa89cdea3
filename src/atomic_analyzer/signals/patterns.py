"""Keyword lists, regexes and integration slugs used by the snapshot collector.

Keyword matches are case-insensitive substring checks against the homepage
HTML. Integration slugs are compared against ``SiteSnapshot.active_integrations``.
"""

import re

# === Development ===

VALUE_KEYWORDS = ("transform", "achieve", "solve", "improve", "help", "enable", "empower")

HEADLINE_RE = re.compile(r"<h1[^>]*>(.+?)</h1>", re.IGNORECASE)

ECONOMIC_VALUE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "efficacy": ("effective", "works", "proven", "results"),
    "speed": ("fast", "quick", "instant", "rapid", "immediate"),
    "reliability": ("reliable", "dependable", "consistent", "stable"),
    "ease": ("easy", "simple", "intuitive", "user-friendly"),
    "flexibility": ("flexible", "versatile", "adaptable", "customizable"),
    "status": ("premium", "exclusive", "luxury", "prestige"),
    "aesthetic": ("beautiful", "elegant", "design", "stunning"),
    "emotion": ("love", "enjoy", "delight", "happy", "satisfaction"),
    "cost": ("affordable", "value", "save", "discount", "price"),
}

TESTING_INTEGRATIONS = (
    "google-analytics-for-wordpress",
    "google-analytics-dashboard-for-wp",
    "nelio-ab-testing",
    "split-test-for-elementor",
)

# === Marketing ===

SEO_INTEGRATIONS = ("wordpress-seo", "all-in-one-seo-pack", "seo-by-rank-math")

META_DESCRIPTION_RE = re.compile(r"<meta[^>]+name=[\"']description[\"'][^>]*>", re.IGNORECASE)
HEADING_TAG_RE = re.compile(r"<h[1-6][^>]*>", re.IGNORECASE)

EMAIL_CAPTURE_INDICATORS = (
    'type="email"',
    "type='email'",
    "newsletter",
    "subscribe",
    "email list",
    "get updates",
)
EMAIL_INTEGRATIONS = ("mailchimp-for-wp", "newsletter", "mailoptin")

TESTIMONIAL_RE = re.compile(r"testimonial|review|feedback|what our customers say", re.IGNORECASE)
TRUST_BADGE_KEYWORDS = ("guarantee", "certified", "accredited", "award", "trusted by")
CLIENT_LOGOS_RE = re.compile(r"clients|featured in|as seen on|trusted by", re.IGNORECASE)
CASE_STUDY_RE = re.compile(r"case study|success story|results", re.IGNORECASE)
REVIEW_COUNT_RE = re.compile(r"\d+\s*(reviews|ratings|customers|clients)", re.IGNORECASE)

# === Sales ===

PHONE_RE = re.compile(r"\d{3}[-.]?\d{3}[-.]?\d{4}")
PRICING_RE = re.compile(r"\$\d+|price|pricing|cost", re.IGNORECASE)
CTA_ELEMENT_RE = re.compile(r"<button|<a[^>]+class=[\"'][^\"']*button", re.IGNORECASE)
CTA_ACTION_WORDS = ("get started", "try free", "sign up", "buy now", "learn more", "download", "book now")
# A button starting within this many characters counts as above the fold.
ABOVE_FOLD_CHARS = 2000

GUARANTEE_TERMS = (
    "guarantee",
    "warranty",
    "money back",
    "risk free",
    "no risk",
    "satisfaction guaranteed",
    "refund",
)

# === Delivery ===

DOCUMENTATION_PAGES = ("documentation", "docs", "help", "support", "faq")
KNOWLEDGE_BASE_INTEGRATIONS = ("echo-knowledge-base", "wedocs", "documentor-lite")

CONTACT_FORM_INTEGRATIONS = ("contact-form-7", "wpforms-lite", "ninja-forms")
LIVE_CHAT_INTEGRATIONS = ("tawk-to", "wp-live-chat-support")

CACHE_INTEGRATIONS = ("wp-rocket", "w3-total-cache", "wp-super-cache", "litespeed-cache")
CDN_INTEGRATIONS = ("cloudflare",)
AUTOMATION_INTEGRATIONS = ("automatewoo", "uncanny-automator")
AUTOLOAD_BUDGET_BYTES = 1_000_000

PROCESS_PAGES = ("how-it-works", "process", "our-process", "getting-started")
PROCESS_TEXT_RE = re.compile(r"step\s*\d|phase\s*\d|process|how it works", re.IGNORECASE)
PROCESS_VISUAL_RE = re.compile(r"<ol|class=[\"'][^\"']*steps|class=[\"'][^\"']*process", re.IGNORECASE)

# === Accounting ===

PREFERRED_GATEWAYS = ("stripe", "paypal", "square")
PAYMENT_INTEGRATIONS = (
    "woocommerce-gateway-stripe",
    "woocommerce-gateway-paypal-express-checkout",
)
MEMBERSHIP_INTEGRATIONS = ("paid-memberships-pro", "restrict-content-pro", "memberpress")
BOOKING_INTEGRATIONS = ("bookly-responsive-appointment-booking-tool", "appointment-hour-booking")
AD_NETWORK_RE = re.compile(r"google-adsense|mediavine|adthrive", re.IGNORECASE)

PRICING_TABLE_RE = re.compile(r"pricing-table|price-table|pricing-grid", re.IGNORECASE)
DOLLAR_AMOUNT_RE = re.compile(r"\$\d+")
VALUE_TERMS = ("value", "save", "roi", "investment", "worth")
URGENCY_TERMS = ("limited", "exclusive", "only", "ends", "hurry")

EMAIL_AUTOMATION_INTEGRATIONS = ("mailchimp-for-woocommerce", "automatewoo")
AFFILIATE_INTEGRATIONS = ("affiliatewp", "thirstyaffiliates")

# === Business type detection ===

COURSE_INTEGRATIONS = ("wp-courseware", "learnpress")
SAAS_RE = re.compile(r"software|app|saas|platform", re.IGNORECASE)
AGENCY_RE = re.compile(r"agency|consulting|services", re.IGNORECASE)
NONPROFIT_RE = re.compile(r"nonprofit|charity|donate", re.IGNORECASE)
