"""
Street vs. Saint resolution for the ambiguous "st" token.
"""
from dataclasses import replace
from typing import List, Sequence

from .models import AnnotatedToken, SemanticType

_ST = "st"


def resolve_st(raw_tokens: Sequence[str], annotated: Sequence[AnnotatedToken]) -> List[AnnotatedToken]:
    """Type every "st" as Way (Street) or untyped (Saint) by position.

    Only the last "st" can be a street designator, and only when no other
    token is already typed as a Way. Every earlier "st" is read as Saint.
    Input that never contained a bare "st" is returned unchanged.
    """
    tokens = list(annotated)
    if _ST not in raw_tokens:
        return tokens

    st_index = []
    other_way = False
    for i, tk in enumerate(tokens):
        if tk.token == _ST:
            st_index.append(i)
        elif tk.token_type == SemanticType.WAY:
            other_way = True

    if not st_index:
        return tokens

    last = st_index.pop()
    for i in st_index:
        tokens[i] = replace(tokens[i], token_type=None)
    tokens[last] = replace(tokens[last], token_type=None if other_way else SemanticType.WAY)
    return tokens
