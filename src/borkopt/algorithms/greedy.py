# src/borkopt/algorithms/greedy.py
import logging
from typing import Dict, Mapping, Optional, Tuple

from ..errors import InvalidCodonError, LengthNotMultipleOfThreeError, UnsupportedResidueError
from ..models import OrganismProfile
from ..tables import PREFERRED_DNA, amino_acid_for, preferred_codon
from .base import BaseOptimizer

logger = logging.getLogger(__name__)


def translate(dna: str) -> str:
    """
    Трансляция ДНК по стандартному генетическому коду.
    Стоп-кодоны дают '*' и не обрывают трансляцию.
    """
    if len(dna) % 3 != 0:
        raise LengthNotMultipleOfThreeError(len(dna))
    protein = []
    for i in range(0, len(dna), 3):
        codon = dna[i:i+3]
        aa = amino_acid_for(codon)
        if aa is None:
            raise InvalidCodonError(codon, i // 3 + 1)
        protein.append(aa)
    return "".join(protein)


def substitute(protein: str, table: Mapping[str, str] = PREFERRED_DNA) -> str:
    """Жадная замена: каждый остаток -> единственный предпочтительный кодон."""
    codons = []
    for pos, aa in enumerate(protein, start=1):
        codon = preferred_codon(aa, table)
        if codon is None:
            raise UnsupportedResidueError(aa, pos)
        codons.append(codon)
    return "".join(codons)


class GreedyOptimizer(BaseOptimizer):
    def __init__(self, profile: OrganismProfile):
        super().__init__(profile)
        self.table = profile.preferred_codons

    def run(self, aa_seq: str, source_dna: Optional[str] = None) -> Tuple[str, Dict]:
        dna = substitute(aa_seq, self.table)
        metrics = {"codons": len(aa_seq)}
        # Для нуклеотидного ввода считаем, сколько кодонов реально заменено
        if source_dna is not None:
            changed = sum(1 for i in range(0, len(dna), 3) if dna[i:i+3] != source_dna[i:i+3])
            metrics["changed_codons"] = changed
        logger.debug(f"{self.name} for {self.profile.name}: {metrics}")
        return dna, metrics

    def run_from_dna(self, dna: str) -> Tuple[str, str, Dict]:
        protein = translate(dna)
        optimized, metrics = self.run(protein, source_dna=dna)
        return protein, optimized, metrics
