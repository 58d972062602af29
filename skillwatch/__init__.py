"""
Skillwatch: snapshot validation and metric aggregation for tracked players.

Subpackages
-----------
- skillwatch.core: configuration and logging
- skillwatch.domain: snapshot and player models
- skillwatch.modules.metrics: the metric catalog
- skillwatch.modules.shared: domain exceptions and game formulas
- skillwatch.modules.snapshots: formatting, gain validation, aggregation
  and classification
"""

__version__ = "2.0.0"
