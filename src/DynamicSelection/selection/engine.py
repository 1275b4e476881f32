"""Selection of catalog lines by suite tags and mapped test identifiers."""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


def escape_identifier(test_id: str) -> str:
    """Escape regex metacharacters so the identifier matches literally."""
    return re.escape(test_id)


def identifier_pattern(test_id: str) -> re.Pattern[str]:
    """Pattern matching ``test_id`` only as a whole token.

    The identifier must be preceded by the start of the line or a non-word
    character and followed by the end of the line or a non-word character,
    so ``TC_A`` never matches inside ``TC_A_EXTENDED``.
    """
    return re.compile(rf"(?:^|\W){escape_identifier(test_id)}(?:$|\W)")


def resolve_selected_tests(
    candidates: Sequence[str],
    suite_tags: Iterable[str],
    mapped_tests: Iterable[str],
) -> tuple[str, ...]:
    """Return the candidates hit by a suite tag or a mapped id, in catalog order."""
    tags = [t for t in suite_tags if t]
    patterns = [identifier_pattern(t) for t in sorted(set(mapped_tests)) if t]

    selected: list[str] = []
    seen: set[str] = set()
    by_tag = by_id = 0

    for line in candidates:
        if line in seen:
            continue
        hit_suite = bool(tags) and any(tag in line for tag in tags)
        hit_mapped = any(p.search(line) for p in patterns)
        if hit_suite or hit_mapped:
            seen.add(line)
            selected.append(line)
            by_tag += hit_suite
            by_id += hit_mapped and not hit_suite

    logger.debug(
        "[DYNAMIC-SELECT] stage=select event=complete candidates=%d "
        "selected=%d by_tag=%d by_mapped_only=%d",
        len(candidates),
        len(selected),
        by_tag,
        by_id,
    )
    return tuple(selected)
