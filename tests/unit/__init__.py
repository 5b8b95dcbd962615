"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with small example elements.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_evidence.py: Evidence store and first-acceptance rule
    - test_key_filter.py: Evidence key filters
    - test_log_sinks.py: Level gating and sink adapters
    - test_metadata_index.py: Reverse property index
    - test_flow_data.py: Execution state machine and error model
    - test_pipeline.py: Construction, lookup, reindexing
    - test_set_header.py: Header name derivation and value merging
    - test_element_data.py: Result records
    - test_config_loader.py: Settings loading/validation
"""
