"""Sales: turning prospects into paying customers."""

from atomic_analyzer.models.enums import BusinessType, Department, Level, Severity
from atomic_analyzer.scoring.rules.base import (
    Check,
    DepartmentRuleSet,
    OpportunityRule,
    below,
    flag,
    is_false,
    raw,
)

CHECKS = (
    Check(
        principle="Trust",
        measure=raw("trust_score"),
        fails=below("trust_score", 70),
        severity=Severity.CRITICAL,
        penalty=30,
        title="Insufficient Trust Signals",
        description="Missing key trust elements like SSL, contact info, or about page.",
        guidance="Trust is the foundation of all sales. Without trust, nothing else matters.",
        action="Ensure SSL certificate, add clear contact information, create detailed about page.",
    ),
    Check(
        principle="Pricing Uncertainty",
        measure=flag("has_clear_pricing", 90, 30),
        fails=is_false("has_clear_pricing"),
        severity=Severity.HIGH,
        penalty=20,
        title="Unclear Pricing",
        description="Pricing is hidden or requires contact for quotes.",
        guidance=(
            "Pricing uncertainty creates friction. Clear pricing builds trust and qualifies "
            "prospects."
        ),
        action="Display pricing clearly. If complex, show starting prices or ranges.",
    ),
    Check(
        principle="Call to Action",
        measure=raw("cta_score"),
        fails=below("cta_score", 60),
        severity=Severity.HIGH,
        penalty=20,
        title="Weak Calls to Action",
        description="CTAs are unclear, hidden, or not compelling.",
        guidance="Every page needs a clear next step. Make it obvious what prospects should do.",
        action="Add clear, action-oriented CTAs above the fold. Use contrasting colors.",
    ),
    Check(
        principle="Risk Reversal",
        measure=flag("has_risk_reversal", 85, 25),
        fails=is_false("has_risk_reversal"),
        severity=Severity.MEDIUM,
        penalty=15,
        title="No Risk Reversal",
        description="No visible guarantee, warranty, or risk reversal offer.",
        guidance=(
            "Risk reversal shifts the risk from buyer to seller, making purchase decisions "
            "easier."
        ),
        action="Add a satisfaction guarantee or warranty. Make it prominent near CTAs.",
    ),
    Check(
        principle="Barriers to Purchase",
        measure=raw("purchase_barriers_score"),
        fails=below("purchase_barriers_score", 70),
        severity=Severity.MEDIUM,
        penalty=15,
        title="High Purchase Friction",
        description="Too many steps, fields, or requirements in purchase process.",
        guidance="Every additional step or field reduces conversion. Minimize friction.",
        action="Streamline checkout. Remove unnecessary fields. Add express checkout options.",
    ),
)

OPPORTUNITIES = (
    OpportunityRule(
        title="Add Live Chat",
        description="Answer questions in real-time to reduce purchase hesitation.",
        impact=Level.HIGH,
        effort=Level.LOW,
    ),
    OpportunityRule(
        title="Implement Abandoned Cart Recovery",
        description="Recover 10-30% of abandoned carts with automated emails.",
        impact=Level.HIGH,
        effort=Level.MEDIUM,
        business_types=frozenset({BusinessType.ECOMMERCE}),
    ),
)

RULE_SET = DepartmentRuleSet(Department.SALES, CHECKS, OPPORTUNITIES)
