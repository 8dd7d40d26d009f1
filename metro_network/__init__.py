"""Metro Network - transfer, nearby-station, routing and fare queries over a metro network."""

from metro_network.api import load_network, plan_trip, validate
from metro_network.version import VERSION

__version__ = VERSION
__all__ = ["VERSION", "load_network", "plan_trip", "validate"]
