"""Test suite for warpspec.

Test Structure:
- unit/curves/: Curve family, warp spec model, default registry, catalog, sampling
- unit/config/: Config models and loader
- unit/utils/: Math and logging utilities
- unit/cli/: Command-line interface
- conftest.py: Shared fixtures and test configuration
"""
