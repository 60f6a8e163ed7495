"""Implementation parts for ``explorer_network.base.cancellation``."""
