FASTA_LINE_WIDTH = 70


def wrap_sequence(seq: str, width: int = FASTA_LINE_WIDTH) -> str:
    return "\n".join(seq[i:i+width] for i in range(0, len(seq), width))


def format_fasta(name: str, seq: str, width: int = FASTA_LINE_WIDTH) -> str:
    """'>name', затем последовательность по `width` символов, в конце перевод строки."""
    if not seq:
        return f">{name}\n"
    return f">{name}\n{wrap_sequence(seq, width)}\n"


def output_filename(name: str) -> str:
    return f"{name or 'optimized'}.fasta"
