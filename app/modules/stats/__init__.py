# Platform statistics module
from app.modules.stats.services import StatsAggregator

__all__ = ["StatsAggregator"]
