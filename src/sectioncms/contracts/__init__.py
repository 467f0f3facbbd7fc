from . import about, content, home, pricing

CONTRACTS = [
    *home.CONTRACTS,
    *content.CONTRACTS,
    *pricing.CONTRACTS,
    *about.CONTRACTS,
]

__all__ = ["CONTRACTS"]
