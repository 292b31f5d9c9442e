"""Tag frequency helpers shared by clustering and icon resolution."""

from collections.abc import Iterable


def count_tags(tag_lists: Iterable[Iterable[str]]) -> dict[str, int]:
    """Occurrence count per tag, keyed in first-seen order."""
    counts: dict[str, int] = {}
    for tags in tag_lists:
        for tag in tags:
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def dominant_tag(counts: dict[str, int]) -> str | None:
    """Tag with the highest count, None when there are no tags.

    Ties go to the tag counted later in first-seen order. Which of several
    equally common tags wins therefore depends on member order.
    """
    best: str | None = None
    for tag, count in counts.items():
        if best is None or not counts[best] > count:
            best = tag
    return best
