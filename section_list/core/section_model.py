from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Tuple, Union

from .errors import InvalidCategoryError, SectionDataError
from .models import ListEntry, SectionCategory

logger = logging.getLogger(__name__)

CategoryRef = Union[SectionCategory, str, int]


class SectionListModel:
    """Categories, their items and which categories are expanded.

    Categories and items are fixed at construction. The only mutable state is
    the expansion flag per category, keyed by ``SectionCategory.key``; every
    category starts collapsed.

    A category reference may be a ``SectionCategory``, a label, a key or an
    ordinal. Unknown references raise ``InvalidCategoryError`` unless the model
    was built with ``fallback_to_first=True``, in which case they resolve to
    the category at ordinal 0.

    Categories must have distinct labels and keys, and each ordinal must
    equal the category's position; otherwise ``SectionDataError`` is raised.
    """

    def __init__(
        self,
        categories: Iterable[SectionCategory],
        items: Iterable[ListEntry],
        *,
        fallback_to_first: bool = False,
    ) -> None:
        self._categories: Tuple[SectionCategory, ...] = tuple(categories)
        self._items: Tuple[ListEntry, ...] = tuple(items)
        self._fallback_to_first = fallback_to_first
        self._by_key: Dict[str, SectionCategory] = {}
        self._by_label: Dict[str, SectionCategory] = {}
        for pos, c in enumerate(self._categories):
            if c.ordinal != pos:
                raise SectionDataError(
                    "category set", f"{c.label!r} has ordinal {c.ordinal}, expected {pos}"
                )
            if c.label in self._by_label:
                raise SectionDataError("category set", f"duplicate label {c.label!r}")
            if c.key in self._by_key:
                raise SectionDataError(
                    "category set",
                    f"{c.label!r} and {self._by_key[c.key].label!r} share key {c.key!r}",
                )
            self._by_key[c.key] = c
            self._by_label[c.label] = c
        self._expanded: Dict[str, bool] = {c.key: False for c in self._categories}
        orphans = self.orphans()
        if orphans:
            logger.debug("%d item(s) match no category and will not be shown", len(orphans))

    @property
    def categories(self) -> Tuple[SectionCategory, ...]:
        return self._categories

    @property
    def items(self) -> Tuple[ListEntry, ...]:
        return self._items

    @property
    def fallback_to_first(self) -> bool:
        return self._fallback_to_first

    def category(self, ref: CategoryRef) -> SectionCategory:
        """Resolve *ref* to one of the model's categories."""
        found = self._lookup(ref)
        if found is not None:
            return found
        if self._fallback_to_first and self._categories:
            first = self._categories[0]
            logger.warning("Unknown category %r, falling back to %r", ref, first.label)
            return first
        raise InvalidCategoryError(ref)

    def _lookup(self, ref: CategoryRef) -> SectionCategory | None:
        if isinstance(ref, SectionCategory):
            return self._by_key.get(ref.key)
        if isinstance(ref, bool):
            return None
        if isinstance(ref, int):
            if 0 <= ref < len(self._categories):
                return self._categories[ref]
            return None
        if isinstance(ref, str):
            return self._by_label.get(ref) or self._by_key.get(ref)
        return None

    # ------------------------------------------------------------------
    # Expansion state
    # ------------------------------------------------------------------

    def toggle_expansion(self, ref: CategoryRef) -> bool:
        """Flip the expansion flag of *ref* and return the new value."""
        cat = self.category(ref)
        expanded = not self._expanded[cat.key]
        self._expanded[cat.key] = expanded
        logger.debug("Section %r %s", cat.label, "expanded" if expanded else "collapsed")
        return expanded

    def is_expanded(self, ref: CategoryRef) -> bool:
        return self._expanded[self.category(ref).key]

    def expanded_categories(self) -> List[SectionCategory]:
        return [c for c in self._categories if self._expanded[c.key]]

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def items_for(self, ref: CategoryRef) -> List[ListEntry]:
        """Items labelled with the category, in source order."""
        label = self.category(ref).label
        return [e for e in self._items if e.section == label]

    def orphans(self) -> List[ListEntry]:
        """Items whose section label matches no category."""
        return [e for e in self._items if e.section not in self._by_label]
