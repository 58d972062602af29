"""
Skillwatch Test Suite
=====================

Test Organization
-----------------
- tests/unit/core/       : Configuration and logging
- tests/unit/domain/     : Snapshot and player models
- tests/unit/metrics/    : Metric catalog
- tests/unit/shared/     : Formulas and domain exceptions
- tests/unit/snapshots/  : Formatter, gain validation, aggregation, classification

Markers
-------
- unit   : fast tests with no external dependencies
- domain : tests of domain rules
"""
