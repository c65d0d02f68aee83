"""Protocol-specific configuration.

This module contains per-chain deployments, contract ABIs and static
capability tables for supported lending protocols.

Currently supported:
- Aave v3 (src.protocols.aave)
"""
