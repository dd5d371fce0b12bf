"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    ICatalogRepository,
    ISearchDictionaryRepository,
    IUserActivityRepository,
)
from app.application.interfaces.services import IActivityRecorder

__all__ = [
    "IActivityRecorder",
    "ICatalogRepository",
    "ISearchDictionaryRepository",
    "IUserActivityRepository",
]
