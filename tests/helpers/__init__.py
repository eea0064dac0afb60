"""Sample application used by the contract and functional tests."""
