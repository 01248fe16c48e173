"""
Pytest fixtures for contract tests.
"""

import pytest


@pytest.fixture
def contract_registry():
    """The registry, restored to its previous contents and modes afterwards."""
    from api.contracts import CONTRACTS

    saved = dict(CONTRACTS)
    modes = {name: contract.mode for name, contract in CONTRACTS.items()}
    yield CONTRACTS
    CONTRACTS.clear()
    CONTRACTS.update(saved)
    for name, mode in modes.items():
        CONTRACTS[name].mode = mode
