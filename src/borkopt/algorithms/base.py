from abc import ABC, abstractmethod
from typing import Dict, Tuple
from ..models import OrganismProfile

class BaseOptimizer(ABC):
    def __init__(self, profile: OrganismProfile):
        self.profile = profile

    @abstractmethod
    def run(self, aa_seq: str) -> Tuple[str, Dict]:
        """Возвращает оптимизированную ДНК и словарь метрик."""
        pass

    @property
    def name(self) -> str:
        return self.__class__.__name__
