"""Delivery: delivering the promised value."""

from atomic_analyzer.models.enums import Department, Level, Severity
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
        principle="Systems",
        measure=flag("has_systems_documentation", 75, 25),
        fails=is_false("has_systems_documentation"),
        severity=Severity.HIGH,
        penalty=25,
        title="No Documented Systems",
        description="No evidence of documented processes or systems.",
        guidance="Systems create consistency and scalability. Without them, quality varies.",
        action="Document your top 3 customer-facing processes. Create simple checklists.",
    ),
    Check(
        principle="Expectation Effect",
        measure=raw("customer_communication_score"),
        fails=below("customer_communication_score", 70),
        severity=Severity.MEDIUM,
        penalty=15,
        title="Poor Customer Communication",
        description="Limited automated confirmations or status updates.",
        guidance=(
            "Customer satisfaction depends on meeting or exceeding expectations through clear "
            "communication."
        ),
        action="Set up automated order confirmations, shipping notifications, and follow-ups.",
    ),
    Check(
        principle="Scalability",
        measure=raw("scalability_score"),
        fails=below("scalability_score", 60),
        severity=Severity.MEDIUM,
        penalty=20,
        title="Limited Scalability",
        description="Current setup appears difficult to scale without major changes.",
        guidance="Scalable businesses can grow revenue without proportionally growing costs.",
        action=(
            "Identify manual processes that could be automated. Implement one automation this "
            "week."
        ),
    ),
    Check(
        principle="Value Stream",
        measure=raw("value_stream_score"),
        fails=below("value_stream_score", 70),
        severity=Severity.MEDIUM,
        penalty=15,
        title="Unclear Value Delivery",
        description="The process of how value is delivered to customers is unclear.",
        guidance="Understanding your value stream helps optimize delivery and find bottlenecks.",
        action="Map out your complete customer journey from purchase to value receipt.",
    ),
)

OPPORTUNITIES = (
    OpportunityRule(
        title="Create Customer Onboarding Sequence",
        description="Guide new customers to success with automated onboarding.",
        impact=Level.HIGH,
        effort=Level.MEDIUM,
    ),
    OpportunityRule(
        title="Implement NPS Surveys",
        description="Measure customer satisfaction and identify improvement areas.",
        impact=Level.MEDIUM,
        effort=Level.LOW,
    ),
)

RULE_SET = DepartmentRuleSet(Department.DELIVERY, CHECKS, OPPORTUNITIES)
