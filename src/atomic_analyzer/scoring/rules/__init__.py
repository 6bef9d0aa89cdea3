"""Department rule set registry."""

from atomic_analyzer.models.enums import Department
from atomic_analyzer.scoring.rules import accounting, delivery, development, marketing, sales
from atomic_analyzer.scoring.rules.base import DepartmentRuleSet

RULE_SETS: dict[Department, DepartmentRuleSet] = {
    Department.DEVELOPMENT: development.RULE_SET,
    Department.MARKETING: marketing.RULE_SET,
    Department.SALES: sales.RULE_SET,
    Department.DELIVERY: delivery.RULE_SET,
    Department.ACCOUNTING: accounting.RULE_SET,
}

__all__ = ["RULE_SETS", "DepartmentRuleSet"]
