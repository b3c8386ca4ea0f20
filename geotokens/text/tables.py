"""
Token table builder
-------------------
Turns abbreviation groups into the three lookup tables the pipeline reads:

- exact tokens: single-token synonym -> canonical
- regex rules: pattern -> canonical template (compiled here, once)
- phrases: multi-word synonym -> canonical

Keys and canonicals are lowercased and accent-folded, except regex keys,
which stay verbatim so they remain valid patterns, and the group references
inside regex canonicals, which keep the case of the group names they name.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .core.diacritics import diacritics
from .exceptions import TokenConfigurationError
from .models import CanonicalEntry, TokenGroup

logger = logging.getLogger(__name__)

# $1 / ${1} / ${name} group references used by the abbreviation data
_GROUP_REF_RE = re.compile(r"\$(?:(\d+)|\{(\w+)\})")


@dataclass(frozen=True)
class RegexRule:
    source: str
    pattern: re.Pattern
    template: str
    entry: CanonicalEntry

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.template, text)


@dataclass(frozen=True)
class TokenTables:
    """Immutable lookup tables; safe to share between threads."""
    exact: Mapping[str, CanonicalEntry]
    regex: Mapping[str, CanonicalEntry]
    phrases: Mapping[str, CanonicalEntry]
    regex_rules: Tuple[RegexRule, ...]
    phrase_rules: Tuple[Tuple[str, CanonicalEntry], ...]
    languages: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "TokenTables":
        return cls.from_maps({}, {}, {})

    @classmethod
    def from_maps(
        cls,
        exact: Mapping[str, CanonicalEntry],
        regex: Mapping[str, CanonicalEntry],
        phrases: Mapping[str, CanonicalEntry],
        languages: Sequence[str] = (),
    ) -> "TokenTables":
        """Freeze already-normalized maps, compiling every regex key."""
        regex_rules = tuple(compile_rule(source, entry) for source, entry in regex.items())
        return cls(
            exact=MappingProxyType(dict(exact)),
            regex=MappingProxyType(dict(regex)),
            phrases=MappingProxyType(dict(phrases)),
            regex_rules=regex_rules,
            phrase_rules=order_phrases(phrases),
            languages=tuple(languages),
        )

    def stats(self) -> Dict[str, int]:
        return {
            "exact_tokens": len(self.exact),
            "regex_rules": len(self.regex),
            "phrases": len(self.phrases),
        }


def _fold(value: str) -> str:
    return diacritics(value.lower())


def fold_template(canonical: str) -> str:
    """Fold the literal text of a regex canonical, leaving group references as written."""
    parts = []
    last = 0
    for m in _GROUP_REF_RE.finditer(canonical):
        parts.append(_fold(canonical[last:m.start()]))
        parts.append(m.group(0))
        last = m.end()
    parts.append(_fold(canonical[last:]))
    return "".join(parts)


def to_python_template(canonical: str) -> str:
    """Translate ``$1`` style group references into ``re.sub`` templates."""
    escaped = canonical.replace("\\", "\\\\")
    return _GROUP_REF_RE.sub(lambda m: "\\g<%s>" % (m.group(1) or m.group(2)), escaped)


def compile_rule(source: str, entry: CanonicalEntry) -> RegexRule:
    try:
        pattern = re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise TokenConfigurationError(f"Invalid token pattern '{source}': {e}") from e

    for m in _GROUP_REF_RE.finditer(entry.canonical):
        ref = m.group(1) or m.group(2)
        known = int(ref) <= pattern.groups if ref.isdigit() else ref in pattern.groupindex
        if not known:
            raise TokenConfigurationError(
                f"Pattern '{source}' has no group '{ref}' referenced by '{entry.canonical}'"
            )

    return RegexRule(source, pattern, to_python_template(entry.canonical), entry)


def order_phrases(phrases: Mapping[str, CanonicalEntry]) -> Tuple[Tuple[str, CanonicalEntry], ...]:
    # Longest phrase first; sorted() is stable so equal lengths keep declaration order
    return tuple(sorted(phrases.items(), key=lambda kv: len(kv[0]), reverse=True))


def build_tables(groups_by_language: Mapping[str, Iterable[TokenGroup]]) -> TokenTables:
    """Build token tables from per-language abbreviation groups.

    Languages are processed in mapping order and groups in source order.
    A key seen twice keeps its first position but takes the later value,
    so when several languages define the same synonym the last one wins.

    Raises:
        TokenConfigurationError: a regex synonym does not compile or its
            canonical references a group the pattern does not define.
    """
    exact: Dict[str, CanonicalEntry] = {}
    regex: Dict[str, CanonicalEntry] = {}
    phrases: Dict[str, CanonicalEntry] = {}
    languages: List[str] = []

    for language, groups in groups_by_language.items():
        languages.append(language)
        for group in groups:
            canonical = fold_template(group.canonical) if group.is_regex else _fold(group.canonical)
            entry = CanonicalEntry(canonical, group.semantic_type)
            if group.is_regex:
                for synonym in group.synonyms:
                    regex[synonym] = entry
            elif group.is_multi_word:
                for synonym in group.synonyms:
                    phrase = _fold(synonym)
                    if phrase != canonical:
                        phrases[phrase] = entry
            else:
                for synonym in group.synonyms:
                    exact[_fold(synonym)] = entry

    tables = TokenTables.from_maps(exact, regex, phrases, languages)
    logger.info(
        f"✅ Token tables built for {', '.join(languages) or 'no languages'}: "
        f"{len(exact)} tokens, {len(regex)} regex rules, {len(phrases)} phrases"
    )
    return tables
