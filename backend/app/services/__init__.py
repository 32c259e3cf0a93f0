"""Services Layer — imperative shell around the pure core (narration, reporting).

Invariants:
    - Services may log; core/ never does
    - Services never re-implement core logic, they only call and report it
"""
