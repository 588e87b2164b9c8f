"""Core Layer - pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Every operation is synchronous call-and-return

Design Decisions:
    - Functional core separated from imperative shell: the FastAPI app only
      translates between HTTP and these modules
"""
