"""Service-layer helpers."""
from stock_analyzer_api.services.utils.gather import (gather_settled,
                                                      gather_strict)

__all__ = ["gather_settled", "gather_strict"]
