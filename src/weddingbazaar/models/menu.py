"""Navigation menu model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """A sidebar navigation entry."""

    label: str
    href: str
    icon: str  # Icon name, e.g. "TrendingUp"

