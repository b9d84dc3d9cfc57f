"""Security status probes."""

from .firewall import firewall_state, firewall_stealth_state

__all__ = ["firewall_state", "firewall_stealth_state"]
