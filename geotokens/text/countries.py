"""
Per-country switches for the canonicalization pipeline.
"""
from typing import Mapping, Optional

# Countries whose street tokens are already English. Running the regex and
# phrase rules there rewrites lookahead patterns that were never meant for them.
SUBSTITUTION_SKIP: Mapping[str, bool] = {
    "US": True,
    "GB": True,
    "CA": True,
    "IE": True,
    "IS": True,
    "SG": True,
    "FI": True,
    "AU": True,
    "NZ": True,
    "GG": True,
}

# Countries where a bare "st" may mean Street or Saint
ST_DISAMBIGUATION: Mapping[str, bool] = {
    "US": True,
}


def normalize_country(country: Optional[str]) -> str:
    return (country or "").strip().upper()


def runs_substitution(country: Optional[str], skip: Mapping[str, bool] = SUBSTITUTION_SKIP) -> bool:
    """Regex and phrase rules run only for a known, non-English country."""
    code = normalize_country(country)
    return bool(code) and not skip.get(code, False)


def runs_st_disambiguation(country: Optional[str], table: Mapping[str, bool] = ST_DISAMBIGUATION) -> bool:
    return table.get(normalize_country(country), False)
