"""Persistence infrastructure."""
from convertaphile.infrastructure.persistence.conversion_repository import (
    ConversionRepository,
    conversion_repository,
)
from convertaphile.infrastructure.persistence.stats_repository import (
    STAT_FIELDS,
    StatsRepository,
    stats_repository,
)

__all__ = [
    "ConversionRepository",
    "STAT_FIELDS",
    "StatsRepository",
    "conversion_repository",
    "stats_repository",
]
