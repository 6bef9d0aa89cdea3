"""Tests for best-effort insight text parsing."""

from atomic_analyzer.insights.parser import (
    extract_list_items,
    parse_insights,
    parse_markdown_sections,
    split_sections,
)

FULL_RESPONSE = """\
1. EXECUTIVE SUMMARY
Strong foundations, weak marketing reach.

2. CRITICAL PRIORITIES
1. Add an email capture form
2. Publish two posts per week
3. Add a money-back guarantee

3. QUICK WINS
- Rewrite the homepage headline
- Add a phone number to the header

4. STRATEGIC MOVES
* Launch a membership tier

5. PMBA WISDOM
"Value is what people pay for." Lead with outcomes.

6. 90-DAY ROADMAP
Month 1: fix trust.
Month 2: build the list.
"""


def test_parse_full_response():
    insights = parse_insights(FULL_RESPONSE)

    assert insights.executive_summary == "Strong foundations, weak marketing reach."
    assert insights.critical_priorities == [
        "Add an email capture form",
        "Publish two posts per week",
        "Add a money-back guarantee",
    ]
    assert insights.quick_wins == ["Rewrite the homepage headline", "Add a phone number to the header"]
    assert insights.strategic_moves == ["Launch a membership tier"]
    assert insights.wisdom == '"Value is what people pay for." Lead with outcomes.'
    assert insights.roadmap == "Month 1: fix trust.\nMonth 2: build the list."
    assert insights.raw_response == FULL_RESPONSE


def test_executive_summary_only_degrades_gracefully():
    insights = parse_insights("EXECUTIVE SUMMARY\nYour site converts poorly because of trust gaps.")

    assert insights.executive_summary == "Your site converts poorly because of trust gaps."
    assert insights.critical_priorities == []
    assert insights.quick_wins == []
    assert insights.strategic_moves == []
    assert insights.wisdom == ""
    assert insights.roadmap == ""


def test_unstructured_text_yields_empty_fields():
    insights = parse_insights("Sorry, I cannot help with that.")
    assert insights.executive_summary == ""
    assert insights.critical_priorities == []
    assert insights.raw_response == "Sorry, I cannot help with that."


def test_markdown_headers_and_inline_text():
    text = "## **Executive Summary:** Good progress overall.\n### Quick Wins\n1) Add alt text\n2) Compress images"
    insights = parse_insights(text)
    assert insights.executive_summary == "Good progress overall."
    assert insights.quick_wins == ["Add alt text", "Compress images"]


def test_plain_body_lines_naming_a_section_stay_in_body():
    text = (
        "EXECUTIVE SUMMARY\n"
        "Wisdom: keep iterating on the offer.\n"
        "CRITICAL PRIORITIES\n"
        "1. Quick Wins: start with the headline\n"
        "2. Fix checkout\n"
        "WISDOM: ship weekly."
    )
    insights = parse_insights(text)

    assert insights.executive_summary == "Wisdom: keep iterating on the offer."
    assert insights.critical_priorities == ["Quick Wins: start with the headline", "Fix checkout"]
    assert insights.quick_wins == []
    assert insights.wisdom == "ship weekly."


def test_bold_inline_header_is_recognised():
    insights = parse_insights("**Quick Wins:** add alt text\n- Compress images")
    assert insights.quick_wins == ["Compress images"]


def test_repeated_header_keeps_first_section():
    bodies = split_sections("QUICK WINS\n- first\nQUICK WINS\n- second")
    assert bodies == {"quick_wins": "- first"}


def test_extract_list_items_ignores_prose_and_bold_lines():
    text = "Intro line\n1. One\n- Two\n• Three\n**Bold heading**\n   * Four  "
    assert extract_list_items(text) == ["One", "Two", "Three", "Four"]


def test_parse_markdown_sections():
    markdown = "# Overview\nIntro text\n\n## Steps\n1. Do it\n"
    assert parse_markdown_sections(markdown) == {"Overview": "Intro text", "Steps": "1. Do it"}
