"""Tests for composite scores and top recommendations."""

from fractions import Fraction

from atomic_analyzer.models.analysis import DepartmentResult, Issue
from atomic_analyzer.models.enums import DEPARTMENT_ORDER, Department, Severity
from atomic_analyzer.scoring.aggregator import (
    aggregate,
    alignment_score,
    overall_score,
    round_half_up,
    top_recommendations,
)


def _issue(severity: Severity, title: str) -> Issue:
    return Issue(
        severity=severity,
        principle="Test",
        title=title,
        description=f"{title} description",
        guidance="guidance",
        action=f"Fix {title}",
    )


def _results(scores, principle_scores=None, issues=None):
    principle_scores = principle_scores or {}
    issues = issues or {}
    return {
        dept: DepartmentResult(
            score=score,
            principle_scores=principle_scores.get(dept, {}),
            issues=tuple(issues.get(dept, ())),
        )
        for dept, score in zip(DEPARTMENT_ORDER, scores)
    }


def test_round_half_up():
    assert round_half_up(Fraction(5, 2)) == 3
    assert round_half_up(Fraction(7, 2)) == 4
    assert round_half_up(Fraction(49, 10)) == 5
    assert round_half_up(Fraction(41, 10)) == 4


def test_overall_score_is_rounded_mean():
    assert overall_score(_results([80, 85, 90, 82, 88])) == 85


def test_overall_score_rounds_half_up():
    # 442 / 5 = 88.4, 443 / 5 = 88.6, 2 departments at 85 and 86 = 85.5
    assert overall_score(_results([88, 88, 88, 89, 89])) == 88
    assert overall_score(_results([88, 88, 89, 89, 89])) == 89
    assert overall_score(_results([85, 86])) == 86


def test_overall_score_empty_is_zero():
    assert overall_score({}) == 0


def test_alignment_is_mean_over_all_principles():
    principle_scores = {
        Department.DEVELOPMENT: {"a": 70, "b": 90},
        Department.MARKETING: {"c": 80, "d": 60},
        Department.SALES: {"e": 100, "f": 50},
        Department.DELIVERY: {"g": 85, "h": 75},
        Department.ACCOUNTING: {"i": 90, "j": 80},
    }
    results = _results([50] * 5, principle_scores=principle_scores)
    assert alignment_score(results) == 78


def test_alignment_without_principles_is_zero():
    assert alignment_score(_results([50] * 5)) == 0


def test_recommendations_capped_at_five_criticals():
    issues = {
        dept: [_issue(Severity.CRITICAL, f"{dept.value} critical"), _issue(Severity.HIGH, f"{dept.value} high")]
        for dept in DEPARTMENT_ORDER
    }
    issues[Department.ACCOUNTING].append(_issue(Severity.CRITICAL, "accounting second critical"))

    recs = top_recommendations(_results([10] * 5, issues=issues))

    assert len(recs) == 5
    assert all(r.priority == 1 for r in recs)
    assert [r.department for r in recs] == ["Development", "Marketing", "Sales", "Delivery", "Accounting"]


def test_recommendations_fall_back_to_high_issues():
    issues = {
        Department.DEVELOPMENT: [_issue(Severity.HIGH, "dev high 1"), _issue(Severity.HIGH, "dev high 2")],
        Department.MARKETING: [_issue(Severity.HIGH, f"mkt high {n}") for n in range(1, 5)],
        Department.SALES: [_issue(Severity.CRITICAL, "sales critical"), _issue(Severity.HIGH, "sales high")],
        Department.DELIVERY: [_issue(Severity.HIGH, "del high"), _issue(Severity.MEDIUM, "del medium")],
        Department.ACCOUNTING: [
            _issue(Severity.HIGH, "acc high 1"),
            _issue(Severity.HIGH, "acc high 2"),
            _issue(Severity.CRITICAL, "acc critical"),
        ],
    }

    recs = top_recommendations(_results([10] * 5, issues=issues))

    assert [(r.title, r.priority) for r in recs] == [
        ("sales critical", 1),
        ("acc critical", 1),
        ("dev high 1", 2),
        ("dev high 2", 2),
        ("mkt high 1", 2),
    ]


def test_recommendation_fields():
    issues = {Department.MARKETING: [_issue(Severity.CRITICAL, "No Email Capture")]}
    (rec,) = top_recommendations(_results([50] * 5, issues=issues))
    assert rec.title == "No Email Capture"
    assert rec.description == "Fix No Email Capture"
    assert rec.department == "Marketing"
    assert rec.priority == 1


def test_medium_and_low_issues_never_recommended():
    issues = {Department.DELIVERY: [_issue(Severity.MEDIUM, "m"), _issue(Severity.LOW, "l")]}
    assert top_recommendations(_results([50] * 5, issues=issues)) == []


def test_aggregate_returns_all_three():
    overall, alignment, recs = aggregate(_results([80, 85, 90, 82, 88]))
    assert (overall, alignment, recs) == (85, 0, [])
