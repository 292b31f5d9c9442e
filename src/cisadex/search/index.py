"""Inverted token index over entity text fields."""

from collections import defaultdict
from collections.abc import Iterable, Sequence

from cisadex.core.logging import get_logger
from cisadex.entity.types import FederalEntity

logger = get_logger(__name__)

# Tokens this short are never indexed
MIN_TOKEN_LENGTH = 3
# Query tokens longer than this also match indexed tokens containing them
SUBSTRING_MIN_QUERY_LENGTH = 4


def tokenize(text: str) -> list[str]:
    """Lowercase and split on whitespace."""
    return text.lower().split()


def searchable_text(entity: FederalEntity) -> str:
    """Concatenate every indexed field of an entity into one lowercase string."""
    parts: list[str] = [
        entity.name,
        entity.parent_agency,
        entity.type,
        entity.location.city,
        entity.location.state,
        entity.location.address,
        entity.jurisdiction.coverage,
        *entity.sectors,
        *entity.functions,
        *entity.capabilities,
        *entity.jurisdiction.specialties,
        *entity.jurisdiction.states,
        *entity.special_programs,
    ]
    return " ".join(parts).lower()


class TextIndex:
    """Token to entity-id posting sets.

    Exact token lookups are a dict hit. Query tokens of four or more
    characters additionally scan every indexed token for a substring match,
    so "cyber" finds "cyber_forensics"; that scan is linear in the number of
    indexed tokens and stops once max_substring_candidates ids are collected.

    Usage:
        index = TextIndex(entities)
        matches = index.search(entities, "cyber boston")
    """

    def __init__(
        self,
        entities: Iterable[FederalEntity],
        max_substring_candidates: int = 10_000,
    ) -> None:
        """Build the index.

        Args:
            entities: Entities to index.
            max_substring_candidates: Upper bound on ids gathered by the
                substring fallback for one query.
        """
        self._max_substring_candidates = max_substring_candidates
        self._postings: dict[str, set[str]] = defaultdict(set)

        entity_count = 0
        for entity in entities:
            entity_count += 1
            for token in tokenize(searchable_text(entity)):
                if len(token) >= MIN_TOKEN_LENGTH:
                    self._postings[token].add(entity.id)

        logger.info(
            "text_index_built",
            entity_count=entity_count,
            token_count=len(self._postings),
        )

    @property
    def token_count(self) -> int:
        """Number of distinct indexed tokens."""
        return len(self._postings)

    def __contains__(self, token: object) -> bool:
        return token in self._postings

    def postings(self, token: str) -> frozenset[str]:
        """Entity ids indexed under an exact token."""
        return frozenset(self._postings.get(token.lower(), ()))

    def candidate_ids(self, query: str) -> set[str]:
        """Union of exact and substring matches for every query token."""
        candidates: set[str] = set()
        truncated = False

        for token in tokenize(query):
            exact = self._postings.get(token)
            if exact:
                candidates |= exact

            if len(token) < SUBSTRING_MIN_QUERY_LENGTH or truncated:
                continue

            for indexed_token, ids in self._postings.items():
                if token in indexed_token:
                    candidates |= ids
                    if len(candidates) >= self._max_substring_candidates:
                        truncated = True
                        break

        if truncated:
            logger.warning(
                "substring_candidates_truncated",
                query=query,
                limit=self._max_substring_candidates,
            )
        return candidates

    def search(self, entities: Sequence[FederalEntity], query: str) -> list[FederalEntity]:
        """Keep the entities matching any query token, in input order.

        A blank query returns the input unchanged.
        """
        if not query or not query.strip():
            return list(entities)

        matching = self.candidate_ids(query)
        return [entity for entity in entities if entity.id in matching]
