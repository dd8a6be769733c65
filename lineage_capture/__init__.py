# =============================================================================
# Lineage Capture Shared Libraries
# =============================================================================
# Event classification, artifact naming and tracking models shared by the
# gateway service and its tests.
# =============================================================================

"""
Lineage capture shared libraries.

Modules:
- payload: tolerant navigation of untyped lineage event payloads
- classification: relevance decision for incoming lineage events
- naming: notebook name normalization and artifact key derivation
- storage_uri: object store connection string parsing
- errors: gateway error taxonomy
- models: Pydantic tracking record and configuration models
"""

__version__ = "0.1.0"
