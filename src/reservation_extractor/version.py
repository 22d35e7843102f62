"""
Version constants for the reservation extraction pipeline.

Recorded alongside every extraction so that results can be traced back to the
rule set that produced them.
"""

__version__ = "1.0.0"

# Component versions (update these when rule tables change)
EXTRACTOR_VERSION = "rule-extractor-1.0.0"
FIELD_MAPPING_VERSION = "field-mapping-1.0.0"
