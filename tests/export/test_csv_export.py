from __future__ import annotations

from hiringslate.core import EvaluationRow, TeamSelector, WeightConfig
from hiringslate.export import (
    format_currency,
    format_score,
    serialize_result,
    summarize,
    to_csv,
    total_cost,
)
from hiringslate.schemas import Candidate

HEADER = "Category,Name,Email,Location,SalaryUSD,ExperienceHits,SkillHits,Score"


def make_row(**overrides) -> EvaluationRow:
    values = {
        "index": 0,
        "category": "Data Scientist",
        "name": "Ada",
        "email": "ada@example.com",
        "location": "London",
        "salary": 120000,
        "experience_hits": 2,
        "skill_hits": 4,
        "score": 0.83456,
        "raw": Candidate(),
    }
    values.update(overrides)
    return EvaluationRow(**values)


def test_empty_slate_is_header_only():
    assert to_csv([]) == HEADER


def test_rows_render_in_order_with_three_decimal_scores():
    rows = [make_row(), make_row(category="Accounting", name="Bob", salary=None, score=0.5)]

    assert to_csv(rows).split("\n") == [
        HEADER,
        "Data Scientist,Ada,ada@example.com,London,120000,2,4,0.835",
        "Accounting,Bob,ada@example.com,London,,2,4,0.500",
    ]


def test_fields_with_commas_quotes_or_newlines_are_quoted():
    row = make_row(name='Ada "The Count"', location="London, UK", email="a\nb")

    line = to_csv([row]).split("\n", 1)[1]

    assert line == 'Data Scientist,"Ada ""The Count""","a\nb","London, UK",120000,2,4,0.835'


def test_format_currency():
    assert format_currency(None) == "N/A"
    assert format_currency(0) == "$0"
    assert format_currency(1234567) == "$1,234,567"
    assert format_currency(-2500) == "-$2,500"


def test_summary_counts_cost_and_open_roles():
    candidates = [
        Candidate.model_validate(
            {
                "name": "Books",
                "work_experiences": [{"roleName": "Accountant"}],
                "annual_salary_expectation": {"full-time": "$55,000"},
            }
        ),
        Candidate.model_validate(
            {"name": "Dev", "work_experiences": [{"roleName": "Software Engineer"}]}
        ),
    ]
    result = TeamSelector().select(candidates, WeightConfig())

    summary = summarize(result)

    assert total_cost(result.selected) == 55000
    assert summary["total_cost_display"] == "$55,000"
    assert summary["filled"] == ["Full Stack Developer", "Accounting"]
    assert summary["open"] == ["Marketing Specialist", "Cybersecurity Analyst", "Data Scientist"]

    payload = serialize_result(result)
    assert [entry["name"] for entry in payload["selected"]] == ["Dev", "Books"]
    assert "raw" not in payload["selected"][0]
    assert payload["by_category"]["Data Scientist"] == []


def test_score_ties_round_up():
    row = make_row(
        category="Accounting",
        name="A",
        email="",
        location="",
        salary=None,
        experience_hits=1,
        skill_hits=1,
        score=0.8125,
    )

    assert to_csv([row]).split("\n")[1] == "Accounting,A,,,,1,1,0.813"
    assert format_score(0.0) == "0.000"
    assert format_score(1.0) == "1.000"
    assert format_score(0.83456) == "0.835"


def test_tied_score_from_scoring_renders_rounded_up():
    candidates = [
        Candidate.model_validate(
            {
                "name": "Books",
                "skills": ["Excel"],
                "annual_salary_expectation": {"full-time": 60000},
                "work_experiences": [{"roleName": "Accountant"}],
            }
        ),
        Candidate.model_validate(
            {
                "name": "Ledger",
                "skills": ["Excel", "GAAP", "SAP", "Tax"],
                "annual_salary_expectation": {"full-time": 70000},
                "work_experiences": [{"roleName": "Accountant"}],
            }
        ),
    ]
    result = TeamSelector().select(
        candidates, WeightConfig(experience=2, skills=1, salary=1), diversity=False
    )

    assert [row.score for row in result.by_category["Accounting"]] == [0.8125, 0.75]
    assert to_csv(result.selected).split("\n")[1] == "Accounting,Books,,,60000,1,1,0.813"


def test_summary_shortlists_top_three_per_category():
    candidates = [
        Candidate.model_validate(
            {
                "name": f"Acct {i}",
                "annual_salary_expectation": {"full-time": 50000 + i * 1000},
                "work_experiences": [{"roleName": "Accountant"}],
            }
        )
        for i in range(5)
    ]
    result = TeamSelector().select(candidates, WeightConfig(), diversity=False)

    shortlist = summarize(result)["shortlist"]

    assert shortlist["Accounting"] == ["Acct 0", "Acct 1", "Acct 2"]
    assert shortlist["Data Scientist"] == []
