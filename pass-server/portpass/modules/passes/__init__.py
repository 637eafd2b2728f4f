"""Pass domain services and models."""

from .exceptions import PassNumberTakenError
from .models import PASS_TYPE_LABELS, Pass, PassCreateInput, PassType, pass_type_label
from .pricing import PassPricing
from .service import PassService

__all__ = [
    "PASS_TYPE_LABELS",
    "Pass",
    "PassCreateInput",
    "PassNumberTakenError",
    "PassPricing",
    "PassService",
    "PassType",
    "pass_type_label",
]
