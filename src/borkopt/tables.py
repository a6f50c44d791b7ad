"""Static codon tables.

PREFERRED_DNA is the single most used codon per residue in
*Alcanivorax borkumensis* SK2. GENETIC_CODE is the standard code taken from
Biopython, with the stop codons folded in as ``*`` so that all 64 triplets
are covered.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from Bio.Data import CodonTable

AA_ALPHABET = frozenset("ACDEFGHIKLMNPQRSTVWY*")
STOP = "*"

PREFERRED_DNA: Mapping[str, str] = MappingProxyType({
    'F': 'TTT', 'L': 'CTG', 'I': 'ATT', 'M': 'ATG', 'V': 'GTG',
    'S': 'AGC', 'P': 'CCG', 'T': 'ACC', 'A': 'GCC', 'Y': 'TAC',
    'H': 'CAC', 'Q': 'CAG', 'N': 'AAC', 'K': 'AAA', 'D': 'GAT',
    'E': 'GAA', 'C': 'TGC', 'W': 'TGG', 'R': 'CGC', 'G': 'GGC',
    '*': 'TAA',  # самый частый стоп
})


def _build_genetic_code() -> Mapping[str, str]:
    table = CodonTable.standard_dna_table
    code = dict(table.forward_table)
    for stop in table.stop_codons:
        code[stop] = STOP
    return MappingProxyType(code)


GENETIC_CODE: Mapping[str, str] = _build_genetic_code()


def synonymous_codons() -> dict:
    """Residue -> list of codons, in standard table order (stops included)."""
    syn = {}
    for codon, aa in GENETIC_CODE.items():
        syn.setdefault(aa, []).append(codon)
    return syn


def preferred_codon(residue: str, table: Mapping[str, str] = PREFERRED_DNA) -> Optional[str]:
    return table.get(residue)


def amino_acid_for(codon: str) -> Optional[str]:
    return GENETIC_CODE.get(codon)
