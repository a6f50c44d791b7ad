# src/borkopt/config.py
import copy
import json
import logging
import os
from typing import Dict

from .models import OutputAlphabet, SequenceMode
from .utils.fasta import FASTA_LINE_WIDTH

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"


class ConfigurationManager:
    def __init__(self, config_file: str = CONFIG_FILE):
        self.config_file = config_file
        self.default_config = {
            "organism": "Alcanivorax borkumensis SK2",
            "mode": "auto",
            "output_alphabet": "dna",
            "record_name": None,
            "line_width": FASTA_LINE_WIDTH,
            "codon_usage_file": None,
        }

    def load_config(self) -> Dict:
        config = copy.deepcopy(self.default_config)
        if not os.path.exists(self.config_file):
            logger.info(f"Config file {self.config_file} not found. Using defaults.")
            return config
        try:
            with open(self.config_file, 'r') as f:
                custom = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read config file {self.config_file}: {e}. Using defaults.")
            return config
        if not isinstance(custom, dict):
            logger.warning(f"Config file {self.config_file} must contain a JSON object. Using defaults.")
            return config

        for key, value in custom.items():
            if key not in config:
                logger.warning(f"Unknown config key '{key}' ignored.")
                continue
            config[key] = value
        return self._validate(config)

    def _validate(self, config: Dict) -> Dict:
        defaults = self.default_config
        try:
            SequenceMode.parse(config["mode"])
        except ValueError:
            logger.warning(f"Invalid mode {config['mode']!r}. Using '{defaults['mode']}'.")
            config["mode"] = defaults["mode"]
        try:
            OutputAlphabet.parse(config["output_alphabet"])
        except ValueError:
            logger.warning(f"Invalid output_alphabet {config['output_alphabet']!r}. Using '{defaults['output_alphabet']}'.")
            config["output_alphabet"] = defaults["output_alphabet"]
        if not isinstance(config["organism"], str) or not config["organism"].strip():
            logger.warning(f"Invalid organism {config['organism']!r}. Using '{defaults['organism']}'.")
            config["organism"] = defaults["organism"]
        # Необязательные строковые параметры: строка или null
        for key in ("record_name", "codon_usage_file"):
            if config[key] is not None and not isinstance(config[key], str):
                logger.warning(f"Invalid {key} {config[key]!r}. Using {defaults[key]!r}.")
                config[key] = defaults[key]
        width = config["line_width"]
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            logger.warning(f"Invalid line_width {width!r}. Using {defaults['line_width']}.")
            config["line_width"] = defaults["line_width"]
        return config
