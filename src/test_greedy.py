import unittest

from borkopt.algorithms.greedy import GreedyOptimizer, substitute, translate
from borkopt.errors import InvalidCodonError, LengthNotMultipleOfThreeError, UnsupportedResidueError
from borkopt.factory import OrganismFactory
from borkopt.tables import AA_ALPHABET, GENETIC_CODE, PREFERRED_DNA, amino_acid_for, preferred_codon

ALL_RESIDUES = "".join(sorted(AA_ALPHABET))


class TestTables(unittest.TestCase):
    def test_genetic_code_is_total(self):
        codons = {a + b + c for a in "ACGT" for b in "ACGT" for c in "ACGT"}
        self.assertEqual(set(GENETIC_CODE), codons)
        self.assertEqual(set(GENETIC_CODE.values()), set(AA_ALPHABET))

    def test_preferred_table_is_total(self):
        self.assertEqual(set(PREFERRED_DNA), set(AA_ALPHABET))
        for aa, codon in PREFERRED_DNA.items():
            self.assertEqual(GENETIC_CODE[codon], aa)

    def test_lookups(self):
        self.assertEqual(preferred_codon("M"), "ATG")
        self.assertIsNone(preferred_codon("B"))
        self.assertIsNone(preferred_codon("MV"))
        self.assertEqual(amino_acid_for("TGA"), "*")
        self.assertIsNone(amino_acid_for("AUG"))

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            PREFERRED_DNA["M"] = "AAA"


class TestTranslate(unittest.TestCase):
    def test_translate(self):
        self.assertEqual(translate("ATGGTCAGCCCT"), "MVSP")
        self.assertEqual(translate(""), "")

    def test_stop_does_not_terminate(self):
        self.assertEqual(translate("ATGTAAATG"), "M*M")

    def test_length_error(self):
        with self.assertRaises(LengthNotMultipleOfThreeError) as ctx:
            translate("ATGGT")
        self.assertEqual(ctx.exception.length, 5)

    def test_invalid_codon(self):
        with self.assertRaises(InvalidCodonError) as ctx:
            translate("ATGNNNAAA")
        self.assertEqual(ctx.exception.codon, "NNN")
        self.assertEqual(ctx.exception.index, 2)


class TestSubstitute(unittest.TestCase):
    def test_substitute(self):
        self.assertEqual(substitute("MVSP"), "ATGGTGAGCCCG")
        self.assertEqual(substitute("M*"), "ATGTAA")

    def test_unsupported_residue(self):
        with self.assertRaises(UnsupportedResidueError) as ctx:
            substitute("MXB")
        self.assertEqual(ctx.exception.residue, "X")
        self.assertEqual(ctx.exception.position, 2)

    def test_round_trip(self):
        for profile in (OrganismFactory.create(), OrganismFactory.create("e. coli")):
            dna = substitute(ALL_RESIDUES, profile.preferred_codons)
            self.assertEqual(len(dna), 3 * len(ALL_RESIDUES))
            self.assertEqual(translate(dna), ALL_RESIDUES)


class TestGreedyOptimizer(unittest.TestCase):
    def setUp(self):
        self.optimizer = GreedyOptimizer(OrganismFactory.create())

    def test_run(self):
        dna, metrics = self.optimizer.run("MVSP")
        self.assertEqual(dna, "ATGGTGAGCCCG")
        self.assertEqual(metrics["codons"], 4)
        self.assertNotIn("changed_codons", metrics)

    def test_run_from_dna_counts_changes(self):
        protein, dna, metrics = self.optimizer.run_from_dna("ATGGTCAGCCCT")
        self.assertEqual(protein, "MVSP")
        self.assertEqual(dna, "ATGGTGAGCCCG")
        # ATG и AGC уже предпочтительные
        self.assertEqual(metrics["changed_codons"], 2)


if __name__ == "__main__":
    unittest.main()
