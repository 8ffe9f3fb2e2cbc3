"""instalens - Instagram profile lookup and engagement aggregator."""

from instalens.models.profile import Profile
from instalens.models.post import Post
from instalens.models.engagement import Engagement
from instalens.models.result import LookupResult
from instalens.config import AggregatorConfig
from instalens.core.orchestrator import Aggregator
from instalens.core.exporter import to_json, to_dict, save_json, load_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "Aggregator",
    "AggregatorConfig",
    # Models
    "Profile",
    "Post",
    "Engagement",
    "LookupResult",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
