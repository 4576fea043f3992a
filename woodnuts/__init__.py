"""
Wood Nuts - Bolt-and-plank puzzle engine

Planks are bolted over a grid. The player removes bolts one at a time
and a plank falls once all of its bolts are gone. The engine provides:
- Static puzzle definitions (bolt grid, planks)
- Session state with removal eligibility and win detection
- A renderer-agnostic board projection
- A REST API and a terminal CLI
"""

__version__ = "0.1.0"
