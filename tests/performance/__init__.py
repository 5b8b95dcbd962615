"""
Performance Tests.

Checks that FlowData processing stays cheap and that many FlowData
objects from one pipeline can be processed concurrently.
"""
