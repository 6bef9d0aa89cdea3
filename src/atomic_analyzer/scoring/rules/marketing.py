"""Marketing: attracting attention and building demand."""

from atomic_analyzer.models.enums import Department, Level, Severity
from atomic_analyzer.scoring.rules.base import (
    Check,
    DepartmentRuleSet,
    OpportunityRule,
    below,
    flag,
    is_false,
    raw,
    scaled,
)

CHECKS = (
    Check(
        principle="Attention",
        measure=raw("seo_score"),
        fails=below("seo_score", 70),
        severity=Severity.HIGH,
        penalty=25,
        title="Poor SEO Configuration",
        description="Missing critical SEO elements that help capture attention from search engines.",
        guidance=(
            "You can't sell if you can't capture attention. SEO is fundamental for attracting "
            "prospects."
        ),
        action=(
            "Install Yoast SEO or RankMath. Optimize title tags, meta descriptions, and create "
            "XML sitemap."
        ),
    ),
    Check(
        principle="Remarkability",
        measure=scaled("posts_last_30_days", 25),
        fails=below("posts_last_30_days", 2),
        severity=Severity.HIGH,
        penalty=20,
        title="Insufficient Content Creation",
        description="Publishing less than 2 pieces of content per month limits remarkability.",
        guidance=(
            "Remarkable content gets shared and talked about. It's your best marketing "
            "investment."
        ),
        action="Commit to publishing valuable content weekly. Focus on solving customer problems.",
    ),
    Check(
        principle="Permission Asset",
        measure=flag("has_email_capture", 80, 20),
        fails=is_false("has_email_capture"),
        severity=Severity.CRITICAL,
        penalty=30,
        title="No Email List Building",
        description="No visible email capture forms or lead magnets found.",
        guidance=(
            "Your email list is your most valuable marketing asset - people who gave permission "
            "to contact them."
        ),
        action="Add email capture forms and create a valuable lead magnet to incentivize signups.",
    ),
    Check(
        principle="Social Proof",
        measure=raw("social_proof_score"),
        fails=below("social_proof_score", 50),
        severity=Severity.MEDIUM,
        penalty=15,
        title="Weak Social Proof",
        description="Limited testimonials, reviews, or trust signals visible.",
        guidance="People look to others for validation. Social proof reduces perceived risk.",
        action="Display customer testimonials prominently. Add review badges and case studies.",
    ),
)

OPPORTUNITIES = (
    OpportunityRule(
        title="Build Topic Clusters",
        description="Create comprehensive content around your main topics to dominate search results.",
        impact=Level.HIGH,
        effort=Level.HIGH,
    ),
    OpportunityRule(
        title="Implement Exit-Intent Popups",
        description="Capture emails from visitors about to leave your site.",
        impact=Level.MEDIUM,
        effort=Level.LOW,
    ),
)

RULE_SET = DepartmentRuleSet(Department.MARKETING, CHECKS, OPPORTUNITIES)
