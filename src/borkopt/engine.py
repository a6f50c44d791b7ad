# src/borkopt/engine.py
"""
Single entry point for callers (CLI, Streamlit page).

optimize() either returns an OptimizationResult or raises an
OptimizationError subclass; nothing partial is ever returned.
"""
import logging
from typing import List, Optional

from .algorithms.greedy import GreedyOptimizer
from .errors import EmptySequenceError, LengthNotMultipleOfThreeError, OptimizationError
from .factory import OrganismFactory
from .models import BatchItem, OptimizationResult, OrganismProfile, OutputAlphabet, SequenceMode
from .sequence import classify, dna_to_rna, normalize, rna_to_dna, split_records
from .utils.fasta import FASTA_LINE_WIDTH, format_fasta, output_filename

logger = logging.getLogger(__name__)


def _optimize_cleaned(cleaned: str, parsed_name: str, mode: SequenceMode, alphabet: OutputAlphabet,
                      record_name: Optional[str], profile: OrganismProfile, line_width: int) -> OptimizationResult:
    if not cleaned:
        raise EmptySequenceError()

    effective = classify(cleaned) if mode == SequenceMode.AUTO else mode
    if mode == SequenceMode.AUTO:
        logger.info(f"Detected input type: {effective.value}")

    optimizer = GreedyOptimizer(profile)
    if effective == SequenceMode.PROTEIN:
        protein = cleaned
        dna, metrics = optimizer.run(protein)
    else:
        source = rna_to_dna(cleaned)
        if len(source) % 3 != 0:
            raise LengthNotMultipleOfThreeError(len(source))
        protein, dna, metrics = optimizer.run_from_dna(source)

    out_seq = dna_to_rna(dna) if alphabet == OutputAlphabet.RNA else dna
    name = (record_name or "").strip() or parsed_name
    logger.debug(f"Optimized '{name}' ({effective.value} -> {alphabet.value}): {metrics}")

    return OptimizationResult(
        name=name,
        sequence=out_seq,
        fasta=format_fasta(name, out_seq, width=line_width),
        mode=effective,
        output_alphabet=alphabet,
        protein=protein,
        source_length=len(cleaned),
        filename=output_filename(name),
    )


def optimize(raw_input: str, mode="auto", output_alphabet="dna", record_name: Optional[str] = None,
             profile: Optional[OrganismProfile] = None, line_width: int = FASTA_LINE_WIDTH) -> OptimizationResult:
    """
    1. нормализация ввода, 2. проверка на пустоту, 3. выбор режима,
    4. (трансляция) + замена кодонов, 5. DNA/RNA, 6. FASTA.
    """
    mode = SequenceMode.parse(mode)
    alphabet = OutputAlphabet.parse(output_alphabet)
    profile = profile or OrganismFactory.default()

    record = normalize(raw_input)
    return _optimize_cleaned(record.residues, record.name, mode, alphabet, record_name, profile, line_width)


def optimize_batch(raw_input: str, mode="auto", output_alphabet="dna",
                   profile: Optional[OrganismProfile] = None,
                   line_width: int = FASTA_LINE_WIDTH) -> List[BatchItem]:
    """Каждая запись multi-FASTA оптимизируется отдельно; ошибка одной не останавливает остальные."""
    mode = SequenceMode.parse(mode)
    alphabet = OutputAlphabet.parse(output_alphabet)
    profile = profile or OrganismFactory.default()

    items = []
    for record in split_records(raw_input):
        try:
            result = _optimize_cleaned(record.residues, record.name, mode, alphabet, None, profile, line_width)
            items.append(BatchItem(record=record, result=result))
        except OptimizationError as e:
            logger.warning(f"Record '{record.name}' failed: {e.kind}: {e.message}")
            items.append(BatchItem(record=record, error=e))
    logger.info(f"Batch finished: {sum(1 for i in items if i.ok)}/{len(items)} records optimized")
    return items
