import pandas as pd

from .extract import results_to_json
from .types import SearchResult

COLUMNS = ["ID", "Entity Name", "Website URL"]


def results_to_frame(results: list[SearchResult]) -> pd.DataFrame:
    rows = [[r.id, r.entity_name, r.website_url] for r in results]
    return pd.DataFrame(rows, columns=COLUMNS)


def results_to_csv(results: list[SearchResult]) -> bytes:
    return results_to_frame(results).to_csv(index=False).encode("utf-8")


def results_to_json_bytes(results: list[SearchResult]) -> bytes:
    return results_to_json(results, indent=2).encode("utf-8")
