"""
Test Suite for Evidence Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline tests
    - performance/: Throughput and concurrency checks
    - fixtures/: Example flow elements and sample settings

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/evidence_pipeline      # With coverage
"""
