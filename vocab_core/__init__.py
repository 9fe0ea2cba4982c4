"""
Adaptive vocabulary review core.

Sub-packages:
- scheduler: pure weighting, decay, selection and migration logic
- analytics: progress statistics and reports over a learning store
- storage: SQLAlchemy persistence of per-profile stores (host side)
"""
