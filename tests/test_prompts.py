import pytest

from prospect_search.prompts import DEFAULT_URL_RULE, INDUSTRY_PROMPTS, RESULTS_PER_SEARCH, build_prompt
from prospect_search.types import INDUSTRIES, STATES, SearchCriteria


@pytest.mark.parametrize("industry", INDUSTRIES + ["Aerospace"])
def test_prompt_never_empty(industry):
    for state in STATES:
        prompt = build_prompt(SearchCriteria(industry=industry, state=state))
        assert prompt.strip()
        assert state in prompt


def test_five_special_cases():
    assert len(INDUSTRY_PROMPTS) == 5
    assert set(INDUSTRY_PROMPTS) <= set(INDUSTRIES)


def test_prompt_asks_for_forty_shaped_records():
    prompt = build_prompt(SearchCriteria(industry="Insurance", state="Ohio"))
    assert RESULTS_PER_SEARCH == 40
    assert "exactly 40 objects" in prompt
    assert "id (number), entityName (string), websiteUrl (string)" in prompt
    assert DEFAULT_URL_RULE in prompt


def test_unknown_industry_uses_default_template():
    prompt = build_prompt(SearchCriteria(industry="Aerospace", state="Texas"))
    assert prompt.startswith("Find business entities in Texas that are in the Aerospace industry.")


def test_utilities_expands_keywords():
    prompt = build_prompt(SearchCriteria(industry="Utilities", state="Georgia"))
    assert "'water authority'" in prompt
    assert "'water and sewer'" in prompt
    assert "in the Utilities industry." not in prompt


def test_taxes_uses_tax_page_url_rule():
    prompt = build_prompt(SearchCriteria(industry="Taxes", state="Maryland"))
    assert "municipalities (cities, towns, counties) in Maryland" in prompt
    assert "tax payment or tax information pages" in prompt
    assert DEFAULT_URL_RULE not in prompt


def test_whitespace_is_trimmed():
    prompt = build_prompt(SearchCriteria(industry="  Non-Profit ", state=" Ohio "))
    assert "in Ohio that are non-profits" in prompt


def test_custom_count():
    prompt = build_prompt(SearchCriteria(industry="Insurance", state="Ohio"), count=5)
    assert "exactly 5 objects" in prompt
