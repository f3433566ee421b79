"""Filters narrowing a user listing."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class UserFilters:
    """Optional predicates for listing users.

    Attributes:
        countries: Country codes to include. Empty means no country filter.
    """

    countries: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """Check whether no predicate is set."""
        return not self.countries

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize for structured logging."""
        return {"countries": list(self.countries)}
