from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
from enum import Enum

DEFAULT_RECORD_NAME = "sequence"

class SequenceMode(Enum):
    AUTO = "auto"
    PROTEIN = "protein"
    NUCLEOTIDE = "nucleotide"

    @classmethod
    def parse(cls, value) -> "SequenceMode":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        # "dna"/"rna" - старые названия режима в интерфейсе
        if key in ("dna", "rna"):
            return cls.NUCLEOTIDE
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown mode '{value}'. Use one of: auto, protein, nucleotide") from None

class OutputAlphabet(Enum):
    DNA = "dna"
    RNA = "rna"

    @classmethod
    def parse(cls, value) -> "OutputAlphabet":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown output alphabet '{value}'. Use 'dna' or 'rna'") from None

@dataclass(frozen=True)
class SequenceRecord:
    name: str
    residues: str

@dataclass(frozen=True)
class OrganismProfile:
    name: str
    tax_id: str
    preferred_codons: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Таблица только для чтения после создания профиля
        object.__setattr__(self, "preferred_codons", MappingProxyType(dict(self.preferred_codons)))

@dataclass(frozen=True)
class OptimizationResult:
    name: str
    sequence: str
    fasta: str
    mode: SequenceMode
    output_alphabet: OutputAlphabet
    protein: str
    source_length: int
    filename: Optional[str] = None

@dataclass(frozen=True)
class BatchItem:
    """Результат для одной записи multi-FASTA: либо result, либо error."""
    record: SequenceRecord
    result: Optional[OptimizationResult] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
