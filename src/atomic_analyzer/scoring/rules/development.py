"""Development: creating something of value that people want or need."""

from atomic_analyzer.models.enums import BusinessType, Department, Level, Severity
from atomic_analyzer.scoring.rules.base import (
    Check,
    DepartmentRuleSet,
    OpportunityRule,
    above,
    below,
    decay,
    flag,
    is_false,
    scaled,
)

CHECKS = (
    Check(
        principle="Value Creation",
        measure=flag("has_clear_value_proposition", 85, 45),
        fails=is_false("has_clear_value_proposition"),
        severity=Severity.CRITICAL,
        penalty=30,
        title="Unclear Value Proposition",
        description="Your website doesn't clearly communicate what value you create for customers.",
        guidance=(
            "Every business must create value by moving prospects from their current state to "
            "their desired state. Without clear value communication, prospects can't understand "
            "why they should buy."
        ),
        action=(
            "Add a clear headline on your homepage explaining the transformation or outcome "
            "customers get from your product/service."
        ),
    ),
    Check(
        principle="Economic Values",
        measure=scaled("economic_values_count", 11),
        fails=below("economic_values_count", 3),
        severity=Severity.HIGH,
        penalty=20,
        title="Limited Economic Values",
        description="Your offer provides fewer than 3 of the 9 possible economic values.",
        guidance=(
            "The more economic values you provide (Efficacy, Speed, Reliability, Ease of Use, "
            "Flexibility, Status, Aesthetic Appeal, Emotion, Cost), the more valuable your offer "
            "becomes."
        ),
        action=(
            "Analyze which economic values you currently provide and add at least 2 more to "
            "strengthen your offer."
        ),
    ),
    Check(
        principle="Iteration Velocity",
        measure=decay("days_since_last_update", 2),
        fails=above("days_since_last_update", 30),
        severity=Severity.MEDIUM,
        penalty=15,
        title="Slow Iteration Cycle",
        description="No updates in {days_since_last_update} days indicates slow improvement velocity.",
        guidance=(
            "Fast iteration cycles lead to rapid improvement. The quicker you can test and "
            "improve, the faster you'll find product-market fit."
        ),
        action="Establish weekly improvement sprints. Update something meaningful every week.",
    ),
    Check(
        principle="Prototype",
        measure=flag("has_testing_evidence", 75, 25),
        fails=is_false("has_testing_evidence"),
        severity=Severity.MEDIUM,
        penalty=10,
        title="No Testing Evidence",
        description="No evidence of A/B testing, beta features, or prototyping.",
        guidance="Testing prototypes before full investment reduces risk and accelerates learning.",
        action="Implement simple A/B testing on key pages. Start with headline variations.",
    ),
)

OPPORTUNITIES = (
    OpportunityRule(
        title="Add More Economic Values",
        description="Review the 9 economic values and identify 2-3 more you could add to your offer.",
        impact=Level.HIGH,
        effort=Level.MEDIUM,
    ),
    OpportunityRule(
        title="Create a Free Trial or Demo",
        description="Let prospects experience value before purchasing.",
        impact=Level.HIGH,
        effort=Level.MEDIUM,
        business_types=frozenset({BusinessType.SAAS, BusinessType.SERVICE}),
    ),
)

RULE_SET = DepartmentRuleSet(Department.DEVELOPMENT, CHECKS, OPPORTUNITIES)
