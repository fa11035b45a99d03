from dataclasses import dataclass, replace

from .config import ALL
from .records import normalize_category


@dataclass(frozen=True)
class Selection:
    """Active dashboard filters. Each field is a store value or ``ALL``."""

    country: str = ALL
    category: str = ALL

    def with_country(self, country):
        return replace(self, country=country or ALL)

    def toggle_category(self, category):
        # Clicking the active category again clears the filter.
        key = normalize_category(category) or ALL
        if key == self.category:
            return replace(self, category=ALL)
        return replace(self, category=key)

    def clear_category(self):
        return replace(self, category=ALL)
