"""Test suite for tweenr.

Test Structure:
- unit/: Unit tests for individual components
  - animation/: Values, keyframe and event tracks, sampling, curves, registry
  - formats/: Curve document schema plus JSON and XML persistence
  - test_config/: Config loading
  - utils/: Logging and math helpers
- fixtures/: Sample curve files
- conftest.py: Shared fixtures
"""
