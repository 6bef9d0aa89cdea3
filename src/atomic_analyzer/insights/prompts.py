"""Prompt text sent to the text-generation collaborator."""

from atomic_analyzer.models.analysis import AnalysisResult
from atomic_analyzer.models.enums import Department

TEST_CONNECTION_PROMPT = "Respond with exactly: 'Claude AI connection successful!'"


def build_analysis_prompt(result: AnalysisResult) -> str:
    lines = [
        "You are a business consultant expert in The Personal MBA framework by Josh Kaufman. "
        "Analyze this business and provide strategic insights.",
        "",
        "BUSINESS CONTEXT:",
        f"Type: {result.business_type}",
        f"Overall Health Score: {result.overall_score}/100",
        f"PMBA Alignment: {result.pmba_alignment}/100",
        "",
        "THE 5 DEPARTMENTS ANALYSIS:",
        "",
    ]
    for dept, dept_result in result.departments.items():
        lines.append(f"{dept.value.upper()} ({dept_result.score}/100):")
        if dept_result.issues:
            lines.append("Issues:")
            for issue in dept_result.issues:
                lines.append(f"- [{issue.severity.value}] {issue.title}")
                lines.append(f"  PMBA Principle: {issue.principle}")
                lines.append(f"  Description: {issue.description}")
        lines.append("")

    lines += [
        "Based on The Personal MBA's 5 Primary Departments framework, provide:",
        "",
        "1. EXECUTIVE SUMMARY (2-3 sentences): Overall business health assessment",
        "",
        "2. CRITICAL PRIORITIES (Top 3): What must be fixed immediately and why",
        "",
        "3. QUICK WINS (5 actions): High-impact, low-effort improvements (<1 hour each)",
        "",
        "4. STRATEGIC MOVES (3-5): Long-term initiatives for sustainable growth",
        "",
        "5. PMBA WISDOM: Which Personal MBA principles are being violated and how to apply them",
        "",
        "6. 90-DAY ROADMAP: Phased plan with weeks 1-4, 5-8, and 9-12",
        "",
        "Keep all advice specific, actionable, and grounded in Personal MBA principles.",
    ]
    return "\n".join(lines)


def build_department_prompt(department: Department, result: AnalysisResult) -> str:
    dept_result = result.departments[department]
    lines = [
        "You are a business consultant specializing in The Personal MBA framework.",
        "",
        f"Analyze the {department.value.upper()} department for this {result.business_type}.",
        "",
        f"Current Score: {dept_result.score}/100",
        "",
    ]
    if dept_result.issues:
        lines.append("Issues Found:")
        for issue in dept_result.issues:
            lines.append(f"- {issue.title} ({issue.severity.value})")
            lines.append(f"  PMBA: {issue.guidance}")
    lines += [
        "",
        "Provide:",
        "1. Deep dive analysis of this department's health",
        "2. Specific Personal MBA principles that apply",
        "3. Step-by-step action plan to improve",
        "4. Metrics to track progress",
        "5. Common pitfalls to avoid",
    ]
    return "\n".join(lines)


def build_quick_wins_prompt(result: AnalysisResult) -> str:
    lines = [
        "Based on this business analysis using The Personal MBA framework:",
        "",
        f"Overall Score: {result.overall_score}/100",
        f"PMBA Alignment: {result.pmba_alignment}/100",
        "",
        "Department Scores:",
    ]
    for dept, dept_result in result.departments.items():
        lines.append(f"- {dept.label}: {dept_result.score}/100")
        for issue in dept_result.issues:
            lines.append(f"  • {issue.title} (Severity: {issue.severity.value})")
    lines += [
        "",
        "Provide exactly 5 quick-win actions that:",
        "1. Can be completed in under 1 hour each",
        "2. Have high impact on business fundamentals",
        "3. Follow Personal MBA principles",
        "4. Are specific and actionable",
        "5. Address the most critical issues first",
        "",
        "Format as a numbered list with just the action (no explanations).",
    ]
    return "\n".join(lines)


def build_process_prompt(department: Department, business_type: str, department_score: int) -> str:
    lines = [
        "You are a business process expert using The Personal MBA framework.",
        "",
        f"Generate Standard Operating Procedures (SOPs) for the {department.value.upper()} department.",
        "",
        f"Business Context: {business_type}",
        f"Department Score: {department_score}/100",
        "",
        "Create comprehensive process documentation including:",
        "",
        "1. PROCESS MAP: Visual flow of key activities",
        "2. SOPs: Detailed step-by-step procedures",
        "3. CHECKLISTS: Daily, weekly, and monthly tasks",
        "4. AUTOMATION OPPORTUNITIES: What can be automated",
        "5. KPIs: Key metrics to track",
        "6. PMBA ALIGNMENT: How processes follow PMBA principles",
        "",
        "Format in clean markdown for easy copy/paste.",
    ]
    return "\n".join(lines)


def build_executive_report_prompt(result: AnalysisResult) -> str:
    lines = [
        "You are creating an executive business report based on The Personal MBA framework.",
        "",
        f"Business Type: {result.business_type}",
        f"Overall Score: {result.overall_score}/100",
        "",
        "Create a professional executive report that includes:",
        "1. Executive Summary (focus on business impact)",
        "2. Key Performance Indicators",
        "3. Critical Business Risks",
        "4. Strategic Recommendations",
        "5. Implementation Timeline",
        "6. Expected ROI",
        "",
        "Make it suitable for C-level executives and investors.",
    ]
    return "\n".join(lines)
