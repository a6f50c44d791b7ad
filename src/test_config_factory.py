import json
import os
import tempfile
import unittest

from borkopt.config import ConfigurationManager
from borkopt.data_loaders import DataLoader
from borkopt.factory import OrganismFactory
from borkopt.tables import PREFERRED_DNA


class TestConfigurationManager(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "config.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, content):
        with open(self.path, "w") as f:
            f.write(content if isinstance(content, str) else json.dumps(content))

    def test_missing_file_gives_defaults(self):
        config = ConfigurationManager(self.path).load_config()
        self.assertEqual(config["mode"], "auto")
        self.assertEqual(config["line_width"], 70)
        self.assertIsNone(config["record_name"])

    def test_non_string_values_reset(self):
        self._write({"organism": 5, "record_name": ["x"], "codon_usage_file": {"a": 1}})
        with self.assertLogs("borkopt.config", level="WARNING"):
            config = ConfigurationManager(self.path).load_config()
        self.assertEqual(config["organism"], "Alcanivorax borkumensis SK2")
        self.assertIsNone(config["record_name"])
        self.assertIsNone(config["codon_usage_file"])

    def test_merge(self):
        self._write({"output_alphabet": "rna", "line_width": 60, "extra": 1})
        config = ConfigurationManager(self.path).load_config()
        self.assertEqual(config["output_alphabet"], "rna")
        self.assertEqual(config["line_width"], 60)
        self.assertNotIn("extra", config)
        self.assertEqual(config["organism"], "Alcanivorax borkumensis SK2")

    def test_invalid_values_reset(self):
        self._write({"mode": "peptide", "output_alphabet": "xna", "line_width": 0})
        with self.assertLogs("borkopt.config", level="WARNING"):
            config = ConfigurationManager(self.path).load_config()
        self.assertEqual(config["mode"], "auto")
        self.assertEqual(config["output_alphabet"], "dna")
        self.assertEqual(config["line_width"], 70)

    def test_broken_json(self):
        self._write("{not json")
        with self.assertLogs("borkopt.config", level="WARNING"):
            config = ConfigurationManager(self.path).load_config()
        self.assertEqual(config, ConfigurationManager(self.path).default_config)

    def test_defaults_not_mutated(self):
        self._write({"mode": "protein"})
        manager = ConfigurationManager(self.path)
        manager.load_config()
        self.assertEqual(manager.default_config["mode"], "auto")


class TestOrganismFactory(unittest.TestCase):
    def test_default_is_borkumensis(self):
        profile = OrganismFactory.create()
        self.assertEqual(profile.name, "Alcanivorax borkumensis SK2")
        self.assertEqual(dict(profile.preferred_codons), dict(PREFERRED_DNA))

    def test_aliases(self):
        self.assertEqual(OrganismFactory.create("SK2").tax_id, "393595")
        self.assertEqual(OrganismFactory.create("E. coli").tax_id, "83333")

    def test_unknown(self):
        with self.assertRaises(ValueError):
            OrganismFactory.create("Mycoplasma")

    def test_from_codon_usage(self):
        profile = OrganismFactory.create("escherichia coli")
        codons = profile.preferred_codons
        self.assertEqual(codons["L"], "CTG")
        self.assertEqual(codons["Y"], "TAT")
        self.assertEqual(codons["*"], "TAA")
        self.assertEqual(len(codons), 21)

    def test_stop_fallback(self):
        profile = OrganismFactory.from_codon_usage("x", "0", {"TGA": 0.0, "CTA": 1.0})
        self.assertEqual(profile.preferred_codons["*"], "TGA")
        self.assertEqual(profile.preferred_codons["L"], "CTA")
        profile = OrganismFactory.from_codon_usage("x", "0", {})
        self.assertEqual(profile.preferred_codons["*"], "TAA")


class TestDataLoader(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.loader = DataLoader(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name, data):
        with open(os.path.join(self.tmpdir.name, name), "w") as f:
            json.dump(data, f)

    def test_rna_keys_accepted(self):
        self._write("usage.json", {"cug": 0.5, "TAG": 0.2})
        self.assertEqual(self.loader.load_codon_usage("usage.json"), {"CTG": 0.5, "TAG": 0.2})

    def test_invalid_codon_rejected(self):
        self._write("bad.json", {"CTGA": 1.0})
        with self.assertRaises(ValueError):
            self.loader.load_codon_usage("bad.json")

    def test_non_numeric_frequency_rejected(self):
        for value in (None, [1], {"x": 1}, "often"):
            self._write("bad.json", {"CTG": value})
            with self.assertRaises(ValueError):
                self.loader.load_codon_usage("bad.json")

    def test_profile_from_file(self):
        self._write("usage.json", {"CTA": 0.9, "CTG": 0.1, "TAG": 0.5})
        profile = OrganismFactory(self.tmpdir.name).from_usage_file("usage.json", name="Custom")
        self.assertEqual(profile.name, "Custom")
        self.assertEqual(profile.preferred_codons["L"], "CTA")
        self.assertEqual(profile.preferred_codons["*"], "TAG")


if __name__ == "__main__":
    unittest.main()
