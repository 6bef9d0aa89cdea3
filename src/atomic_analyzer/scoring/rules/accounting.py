"""Accounting: tracking money flow and sustainable profitability."""

from atomic_analyzer.models.enums import Department, Level, Severity
from atomic_analyzer.scoring.rules.base import (
    Check,
    DepartmentRuleSet,
    OpportunityRule,
    below,
    raw,
    scaled,
)

CHECKS = (
    Check(
        principle="Value Capture",
        measure=raw("payment_score"),
        fails=below("payment_score", 70),
        severity=Severity.HIGH,
        penalty=20,
        title="Limited Payment Options",
        description="Fewer than 3 payment methods available.",
        guidance=(
            "You can only capture value if customers can easily pay you. More options = more "
            "sales."
        ),
        action=(
            "Add multiple payment methods. Consider PayPal, Stripe, and buy-now-pay-later "
            "options."
        ),
    ),
    Check(
        principle="Sufficiency",
        measure=scaled("revenue_streams", 33),
        fails=below("revenue_streams", 2),
        severity=Severity.CRITICAL,
        penalty=30,
        title="Single Revenue Stream",
        description="Relying on only one source of revenue is risky.",
        guidance="Multiple revenue streams provide stability and growth opportunities.",
        action=(
            "Identify 2-3 additional revenue streams you could add (upsells, subscriptions, "
            "services)."
        ),
    ),
    Check(
        principle="Profit Margin",
        measure=raw("pricing_optimization_score"),
        fails=below("pricing_optimization_score", 60),
        severity=Severity.MEDIUM,
        penalty=15,
        title="Unoptimized Pricing",
        description="No evidence of pricing tiers or value-based pricing.",
        guidance="Profit margin determines sustainability. Price based on value, not just cost.",
        action=(
            "Create 3 pricing tiers. Anchor with premium option to make standard seem "
            "reasonable."
        ),
    ),
    Check(
        principle="Leverage",
        measure=raw("financial_leverage_score"),
        fails=below("financial_leverage_score", 50),
        severity=Severity.MEDIUM,
        penalty=15,
        title="Low Financial Leverage",
        description="Not maximizing results from existing assets or efforts.",
        guidance="Leverage multiplies results without proportional effort increase.",
        action="Identify your highest-margin products/services and focus marketing there.",
    ),
)

OPPORTUNITIES = (
    OpportunityRule(
        title="Add Subscription Options",
        description="Create recurring revenue with subscription tiers.",
        impact=Level.HIGH,
        effort=Level.MEDIUM,
    ),
    OpportunityRule(
        title="Implement Dynamic Pricing",
        description="Test different price points to optimize revenue.",
        impact=Level.MEDIUM,
        effort=Level.MEDIUM,
    ),
)

RULE_SET = DepartmentRuleSet(Department.ACCOUNTING, CHECKS, OPPORTUNITIES)
