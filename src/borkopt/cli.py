import argparse
import logging
import sys

from .config import ConfigurationManager, CONFIG_FILE
from .engine import optimize, optimize_batch
from .errors import OptimizationError
from .factory import OrganismFactory
from .utils.genbank_export import GenBankExporter
from .utils.reporting import ReportGenerator

logger = logging.getLogger("borkopt")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Greedy codon optimizer (one preferred codon per amino acid)")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--sequence", type=str, help="Raw sequence or FASTA text")
    src.add_argument("--input", type=str, help="FASTA / plain text file (default: stdin)")
    parser.add_argument("--mode", choices=["auto", "protein", "nucleotide", "dna", "rna"], help="Input type")
    parser.add_argument("--alphabet", choices=["dna", "rna"], help="Output alphabet")
    parser.add_argument("--name", type=str, help="Record name for the FASTA header (single-sequence runs only)")
    parser.add_argument("--organism", type=str, help="Host organism preset")
    parser.add_argument("--codon-usage", type=str, help="JSON codon usage table for a custom host")
    parser.add_argument("--output", type=str, help="Write FASTA to this file instead of stdout")
    parser.add_argument("--genbank", type=str, help="Also write a GenBank file (single-sequence runs only)")
    parser.add_argument("--report", type=str, help="Also write a PDF report (single-sequence runs only)")
    parser.add_argument("--batch", action="store_true", help="Optimize every record of a multi-FASTA input")
    parser.add_argument("--config", type=str, default=CONFIG_FILE, help="JSON config file")
    parser.add_argument("--verbose", action="store_true")
    return parser


def _read_input(args) -> str:
    if args.sequence is not None:
        return args.sequence
    if args.input:
        with open(args.input, 'r', encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def _write(path: str, data, binary: bool = False):
    with open(path, 'wb' if binary else 'w') as f:
        f.write(data)
    logger.info(f"Saved {path}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.batch and (args.name or args.genbank or args.report):
        parser.error("--name, --genbank and --report apply to single-sequence runs, not --batch")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    config = ConfigurationManager(args.config).load_config()
    mode = args.mode or config["mode"]
    alphabet = args.alphabet or config["output_alphabet"]
    width = config["line_width"]

    factory = OrganismFactory()
    usage_file = args.codon_usage or config["codon_usage_file"]
    try:
        if usage_file:
            profile = factory.from_usage_file(usage_file, name=args.organism)
        else:
            profile = factory.create(args.organism or config["organism"])
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        raw = _read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.batch:
        items = optimize_batch(raw, mode=mode, output_alphabet=alphabet, profile=profile, line_width=width)
        failed = [i for i in items if not i.ok]
        for item in failed:
            print(f"Error in '{item.record.name}': {item.error.message}", file=sys.stderr)
        text = "".join(i.result.fasta for i in items if i.ok)
        if args.output:
            _write(args.output, text)
        else:
            sys.stdout.write(text)
        return 1 if failed or not items else 0

    try:
        result = optimize(raw, mode=mode, output_alphabet=alphabet,
                          record_name=args.name or config["record_name"],
                          profile=profile, line_width=width)
    except OptimizationError as e:
        print(f"Error ({e.kind}): {e.message}", file=sys.stderr)
        return 1

    if args.output:
        _write(args.output, result.fasta)
    else:
        sys.stdout.write(result.fasta)
    if args.genbank:
        _write(args.genbank, GenBankExporter.create_record(result, profile))
    if args.report:
        _write(args.report, ReportGenerator.create_pdf(result, profile), binary=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
