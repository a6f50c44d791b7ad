# src/borkopt/factory.py
import logging
from typing import Dict, Optional

from .models import OrganismProfile
from .data_loaders import DataLoader, ECOLI_K12_USAGE
from .tables import PREFERRED_DNA, synonymous_codons

logger = logging.getLogger(__name__)

BORKUMENSIS = "Alcanivorax borkumensis SK2"
ECOLI = "Escherichia coli K-12"

ALIASES = {
    "alcanivorax borkumensis sk2": BORKUMENSIS,
    "alcanivorax borkumensis": BORKUMENSIS,
    "a. borkumensis": BORKUMENSIS,
    "borkumensis": BORKUMENSIS,
    "sk2": BORKUMENSIS,
    "escherichia coli k-12": ECOLI,
    "escherichia coli": ECOLI,
    "e. coli": ECOLI,
    "coli": ECOLI,
}


class OrganismFactory:
    def __init__(self, data_dir: str = "data"):
        self.loader = DataLoader(data_dir)

    @staticmethod
    def presets():
        return [BORKUMENSIS, ECOLI]

    @staticmethod
    def default() -> OrganismProfile:
        return OrganismProfile(name=BORKUMENSIS, tax_id="393595", preferred_codons=PREFERRED_DNA)

    @staticmethod
    def create(name: Optional[str] = None) -> OrganismProfile:
        if not name:
            return OrganismFactory.default()
        canonical = ALIASES.get(name.strip().lower())
        if canonical == BORKUMENSIS:
            return OrganismFactory.default()
        if canonical == ECOLI:
            return OrganismFactory.from_codon_usage(ECOLI, "83333", ECOLI_K12_USAGE)
        raise ValueError(f"Unknown organism '{name}'. Available: {', '.join(OrganismFactory.presets())}")

    @staticmethod
    def from_codon_usage(name: str, tax_id: str, usage: Dict[str, float]) -> OrganismProfile:
        """
        Один предпочтительный кодон на аминокислоту: самый частый синоним из таблицы usage.
        При равенстве частот - первый в порядке стандартной таблицы.
        Если синонимов в usage нет - первый кодон (для стопа это TAA).
        """
        preferred = {}
        for aa, codons in synonymous_codons().items():
            present = [c for c in codons if c in usage]
            preferred[aa] = max(present, key=lambda c: usage[c]) if present else codons[0]
        logger.debug(f"Derived preferred codons for {name}: {preferred}")
        return OrganismProfile(name=name, tax_id=tax_id, preferred_codons=preferred)

    def from_usage_file(self, path: str, name: Optional[str] = None, tax_id: str = "custom") -> OrganismProfile:
        usage = self.loader.load_codon_usage(path)
        return self.from_codon_usage(name or path, tax_id, usage)
