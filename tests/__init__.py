"""
Test suite for the CRM shared-kernel domain model

Contains:
- tests/unit/          : Unit tests for value objects, aggregate and contracts
"""
