# =============================================================================
# Lineage Capture Gateway
# =============================================================================
# FastAPI service that receives OpenLineage events, archives relevant ones
# and registers them for downstream lineage processing.
# =============================================================================

__version__ = "0.1.0"
