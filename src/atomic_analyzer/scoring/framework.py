"""Personal MBA framework catalogue.

Describes the five departments, their key principles and the nine economic
values. Rule sets score a subset of these principles; the rest are shown to
users as prompts for reflection.
"""

from dataclasses import dataclass, field
from typing import Any

from atomic_analyzer.models.enums import Department


@dataclass
class DepartmentProfile:
    """Display metadata for one department."""

    department: Department
    name: str
    icon: str
    description: str
    key_principles: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.department.value,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
            "key_principles": dict(self.key_principles),
        }


ECONOMIC_VALUES: dict[str, str] = {
    "Efficacy": "How well does it work?",
    "Speed": "How quickly does it work?",
    "Reliability": "Can I depend on it?",
    "Ease of Use": "How easy is it to use?",
    "Flexibility": "How many things does it do?",
    "Status": "What does this say about me?",
    "Aesthetic Appeal": "How attractive/appealing is it?",
    "Emotion": "How does this make me feel?",
    "Cost": "How much do I have to give up?",
}

FRAMEWORK: dict[Department, DepartmentProfile] = {
    Department.DEVELOPMENT: DepartmentProfile(
        department=Department.DEVELOPMENT,
        name="Development",
        icon="🔬",
        description="Creating something of value that people want or need",
        key_principles={
            "Value Creation": "Are you creating genuine value?",
            "Iteration Velocity": "How fast can you improve?",
            "Economic Values": "Which of the 9 economic values do you provide?",
            "Prototype": "Are you testing before investing heavily?",
            "Iteration Cycle": "How quickly can you learn and adapt?",
        },
    ),
    Department.MARKETING: DepartmentProfile(
        department=Department.MARKETING,
        name="Marketing",
        icon="📢",
        description="Attracting attention and building demand for what you create",
        key_principles={
            "Attention": "Are you capturing attention of prospects?",
            "Receptivity": "Are prospects open to your message?",
            "Remarkability": "Is your offer worth talking about?",
            "Probable Purchaser": "Are you reaching the right people?",
            "Preoccupation": "What are prospects thinking about?",
            "End Result": "What transformation do you promise?",
            "Qualification": "Are you filtering for ideal customers?",
        },
    ),
    Department.SALES: DepartmentProfile(
        department=Department.SALES,
        name="Sales",
        icon="💰",
        description="Turning prospective customers into paying customers",
        key_principles={
            "Trust": "Do prospects trust you?",
            "Common Ground": "Do you understand their needs?",
            "Education": "Are prospects informed about value?",
            "Pricing Uncertainty": "Is pricing clear and fair?",
            "Barriers to Purchase": "What prevents people from buying?",
            "Risk Reversal": "Are you reducing perceived risk?",
            "Call to Action": "Is next step obvious?",
        },
    ),
    Department.DELIVERY: DepartmentProfile(
        department=Department.DELIVERY,
        name="Delivery",
        icon="🚀",
        description="Delivering the value promised and ensuring customer satisfaction",
        key_principles={
            "Value Stream": "How is value actually delivered?",
            "Expectation Effect": "Are you meeting/exceeding expectations?",
            "Predictability": "Is delivery consistent?",
            "Throughput": "How much can you deliver?",
            "Duplication": "Can processes be replicated?",
            "Scalability": "Can you grow without breaking?",
            "Systems": "Are processes documented and automated?",
        },
    ),
    Department.ACCOUNTING: DepartmentProfile(
        department=Department.ACCOUNTING,
        name="Accounting",
        icon="💵",
        description="Tracking money flow and ensuring sustainable profitability",
        key_principles={
            "Profit Margin": "How much profit per sale?",
            "Value Capture": "Are you capturing fair value?",
            "Sufficiency": "Is revenue enough to sustain?",
            "Valuation": "What is the business worth?",
            "Cash Flow Cycle": "How quickly does money flow?",
            "Breakeven": "What volume is needed to survive?",
            "Amortization": "Are you spreading costs intelligently?",
            "Leverage": "Are you multiplying results?",
        },
    ),
}


def alignment_message(score: int) -> str:
    """Human-readable verdict for a framework alignment score."""
    if score >= 90:
        return "🎯 Excellent PMBA alignment! Your business follows core principles exceptionally well."
    if score >= 75:
        return "✅ Good PMBA alignment with room for improvement in some areas."
    if score >= 60:
        return "⚠️ Moderate alignment. Several PMBA principles need attention."
    return "🚨 Low PMBA alignment. Focus on implementing fundamental principles."


def framework_catalogue() -> dict[str, Any]:
    return {
        "departments": [FRAMEWORK[d].to_dict() for d in Department],
        "economic_values": dict(ECONOMIC_VALUES),
    }
