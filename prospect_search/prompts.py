from typing import Dict

from .types import SearchCriteria

RESULTS_PER_SEARCH = 40


RESULT_FORMAT_INSTRUCTIONS = (
    "Format the response as a JSON array with exactly {count} objects, each having these properties: "
    "id (number), entityName (string), websiteUrl (string). {url_rule} "
    "Reply with only the JSON array inside a ```json code block."
)

DEFAULT_URL_RULE = "Only include valid URLs."


# industry -> (search phrase, url rule). {state} is filled in at build time.
INDUSTRY_PROMPTS: Dict[str, tuple[str, str]] = {
    "Municipalities with Utilities": (
        "Find municipalities in {state} that specifically offer utility services.",
        DEFAULT_URL_RULE,
    ),
    "Utilities": (
        "Find business entities in {state} that are in the utilities industry OR contain any of these "
        "keywords: 'water authority', 'waste', 'water and sewer', 'electric', 'gas', 'energy', 'oil'.",
        DEFAULT_URL_RULE,
    ),
    "Non-Profit": (
        "Find business entities in {state} that are non-profits OR contain any of these keywords: "
        "'membership', 'association', 'club'.",
        DEFAULT_URL_RULE,
    ),
    "Taxes": (
        "Find only municipalities (cities, towns, counties) in {state} that specifically handle and collect "
        "tax payments. Focus on entities that have tax collection departments or provide tax payment services.",
        "Only include valid URLs that lead to their tax payment or tax information pages.",
    ),
    "Country Club": (
        "Find business entities in {state} that are country clubs OR contain any of these keywords: "
        "'golf club', 'golf course', 'yacht club', 'tennis club', 'swim club'.",
        DEFAULT_URL_RULE,
    ),
}

DEFAULT_PROMPT = (
    "Find business entities in {state} that are in the {industry} industry.",
    DEFAULT_URL_RULE,
)


def build_prompt(criteria: SearchCriteria, count: int = RESULTS_PER_SEARCH) -> str:
    """
    Turn (industry, state) into the instruction sent to the model.
    Unknown industries fall back to DEFAULT_PROMPT.
    """
    industry = criteria.industry.strip()
    state = criteria.state.strip()

    phrase, url_rule = INDUSTRY_PROMPTS.get(industry, DEFAULT_PROMPT)
    head = phrase.format(state=state, industry=industry)
    tail = RESULT_FORMAT_INSTRUCTIONS.format(count=count, url_rule=url_rule)
    return f"{head} {tail}"
