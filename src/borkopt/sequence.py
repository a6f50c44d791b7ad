# src/borkopt/sequence.py
import re
from io import StringIO
from typing import List, Optional

from Bio.SeqIO.FastaIO import SimpleFastaParser

from .models import SequenceMode, SequenceRecord, DEFAULT_RECORD_NAME
from .tables import AA_ALPHABET

LINE_SPLIT = re.compile(r"\r?\n")
NON_RESIDUE = re.compile(r"[^A-Za-z*]")


def clean_residues(text: str) -> str:
    return NON_RESIDUE.sub("", text).upper()


def _header_name(line: str) -> str:
    return line[1:].strip() or DEFAULT_RECORD_NAME


def normalize(raw: str) -> SequenceRecord:
    """
    Разбирает сырой ввод (FASTA или просто текст).
    Имя берется из первого заголовка '>', остальные строки склеиваются,
    все кроме [A-Za-z*] выбрасывается, результат в верхнем регистре.
    Пустая последовательность здесь не ошибка - это проверяет вызывающий код.
    """
    name = None
    parts = []
    for line in LINE_SPLIT.split(raw or ""):
        if line.startswith(">"):
            if name is None:
                name = _header_name(line)
            continue
        if line.strip():
            parts.append(line)
    return SequenceRecord(name or DEFAULT_RECORD_NAME, clean_residues("".join(parts)))


def classify(cleaned: str) -> SequenceMode:
    """
    Protein, если все символы из алфавита аминокислот, иначе nucleotide.
    Строка только из ACGT всегда будет protein (A, C, G, T - тоже аминокислоты),
    для нуклеотидного ввода нужен явный режим.
    """
    if all(ch in AA_ALPHABET for ch in cleaned):
        return SequenceMode.PROTEIN
    return SequenceMode.NUCLEOTIDE


def detect(raw: str) -> Optional[SequenceMode]:
    cleaned = normalize(raw).residues
    if not cleaned:
        return None
    return classify(cleaned)


def split_records(raw: str) -> List[SequenceRecord]:
    """
    Разбивает multi-FASTA на записи через Biopython.
    Текст до первого '>' - отдельная запись с именем по умолчанию.
    """
    lines = LINE_SPLIT.split(raw or "")
    first = next((i for i, line in enumerate(lines) if line.startswith(">")), len(lines))

    records = []
    prefix = "".join(lines[:first])
    if prefix.strip():
        records.append(SequenceRecord(DEFAULT_RECORD_NAME, clean_residues(prefix)))

    handle = StringIO("\n".join(lines[first:]))
    for title, seq in SimpleFastaParser(handle):
        records.append(SequenceRecord(title.strip() or DEFAULT_RECORD_NAME, clean_residues(seq)))
    return records


def dna_to_rna(seq: str) -> str:
    return seq.replace("T", "U")


def rna_to_dna(seq: str) -> str:
    return seq.replace("U", "T")
