"""
Use cases for the fitclub backend.

Each service module opens a unit of work over the SQL stores and delegates
the identity rules to ``identity_service.IdentityReconciler``. Callers (an
HTTP layer, scripts, tests) should go through these services instead of
touching the stores directly.
"""
