# core/readiness/__init__.py
"""
Household readiness core.

This package defines:
- Inventory, household and result models
- Deterministic scoring against hazard- and plan-adjusted targets
- The household-size guard and per-person/household supply rule
- Household report generation (score band, status, action lines)
"""
