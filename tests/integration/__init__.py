"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that evidence intake, processing, metadata queries
and response header aggregation work together.

Test Files:
    - test_pipeline_end_to_end.py: Full request workflow
    - test_builder_with_settings.py: Pipelines built from YAML settings
"""
