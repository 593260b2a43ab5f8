"""
Test suite for tdux.

Focus areas:
- Channel ordering and cancellation
- One reducer per action type
- Synchronous should -> did propagation
- Teardown semantics
"""
