# smartreplace/match/resolver.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .._logging import resolve_logger
from ..apply import apply_resolution, replace_every
from ..errors.replace import ValidationError
from .strategies import STRATEGIES, Strategy

__all__ = ["Resolution", "resolve", "smart_replace", "replace_with_resolution"]

UNIQUE = "unique"
AMBIGUOUS = "ambiguous"
NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Where (and whether) a target snippet was located in a document."""

    status: str  # "unique", "ambiguous", "not_found"
    strategy: Optional[str] = None
    matched_text: str = ""
    start: int = -1
    end: int = -1
    occurrences: int = 0

    @property
    def found(self) -> bool:
        return self.status != NOT_FOUND


def resolve(
    content: str,
    find: str,
    *,
    strategies: Sequence[Tuple[str, Strategy]] = STRATEGIES,
    logger=None,
    log: bool = False,
) -> Resolution:
    """
    Run the strategies in order and settle on the first candidate that occurs
    literally in `content`.

    That candidate alone decides the outcome: unique when its first and last
    occurrence coincide, ambiguous otherwise. Later candidates and strategies
    are never consulted once a candidate has decided.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    for name, strategy in strategies:
        for candidate in strategy(content, find):
            index = content.find(candidate)
            if index == -1:
                continue
            last_index = content.rfind(candidate)
            end = index + len(candidate)
            if index != last_index:
                # str.count skips overlapping copies ("aa" in "aaa")
                count = max(content.count(candidate), 2)
                log.debug(f"[{name}] candidate occurs {count} times; ambiguous")
                return Resolution(AMBIGUOUS, name, candidate, index, end, count)
            log.debug(f"[{name}] unique match at [{index}:{end}]")
            return Resolution(UNIQUE, name, candidate, index, end, 1)

    log.debug("no strategy located the target")
    return Resolution(NOT_FOUND)


def smart_replace(
    content: str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
    *,
    strategies: Sequence[Tuple[str, Strategy]] = STRATEGIES,
    logger=None,
    log: bool = False,
) -> str:
    """
    Replace the region of `content` that `old_string` refers to with `new_string`.

    `old_string` does not have to be byte-identical: indentation, trailing
    whitespace, escaped characters and partially stale context are tolerated
    by the fuzzier strategies. With `replace_all` the first located candidate
    is replaced everywhere it occurs and uniqueness is not enforced.

    Raises:
        ValidationError: `old_string` equals `new_string`.
        NotFoundError: no strategy located `old_string`.
        AmbiguousError: the located text occurs more than once and
            `replace_all` is False.
    """
    new_content, _ = replace_with_resolution(
        content, old_string, new_string, replace_all, strategies=strategies, logger=logger, log=log
    )
    return new_content


def replace_with_resolution(
    content: str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
    *,
    strategies: Sequence[Tuple[str, Strategy]] = STRATEGIES,
    logger=None,
    log: bool = False,
) -> Tuple[str, Resolution]:
    """Same as smart_replace, also returning the Resolution the edit was based on."""
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    if old_string == new_string:
        raise ValidationError("oldString and newString must be different.")

    resolution = resolve(content, old_string, strategies=strategies, logger=log)

    if replace_all and resolution.found:
        log.info(
            f"Replacing all {resolution.occurrences} occurrence(s) found by '{resolution.strategy}'"
        )
        return replace_every(content, resolution.matched_text, new_string), resolution

    result = apply_resolution(content, resolution, new_string)
    log.info(f"Replaced unique match found by '{resolution.strategy}'")
    return result, resolution
